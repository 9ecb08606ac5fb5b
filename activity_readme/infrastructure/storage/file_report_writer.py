"""Report writer storing the document on the local filesystem."""

from __future__ import annotations

from pathlib import Path

from activity_readme.domain.entities.errors import ReportWriteError
from activity_readme.shared import get_logger

logger = get_logger(__name__)


class FileReportWriter:
    """Writes the rendered report to a fixed path, replacing any previous one."""

    def __init__(self, path: str = "README.md") -> None:
        self.path = Path(path)

    def write(self, content: str) -> str:
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("report.write_failed", path=str(self.path), error=str(e))
            raise ReportWriteError(
                f"can't write file {self.path}: {e}", details={"path": str(self.path)}
            ) from e

        logger.info("report.written", path=str(self.path), size=len(content))
        return str(self.path)
