"""Domain port for persisting the rendered report."""

from __future__ import annotations

from typing import Protocol


class IReportWriter(Protocol):
    """Interface for storing the final document."""

    def write(self, content: str) -> str:
        """
        Persist ``content`` and return where it was written.

        Raises:
            ReportWriteError: When the document cannot be stored.
        """
        ...
