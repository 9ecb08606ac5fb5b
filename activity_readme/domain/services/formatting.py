"""Text helpers shared by the renderers."""

from datetime import datetime

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"


def format_local_time(moment: datetime) -> str:
    """Render a local time as ``2021-05-01 09:30:00 -0700 PDT``."""
    return moment.strftime(LOCAL_TIME_FORMAT).rstrip()
