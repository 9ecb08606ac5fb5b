from .file_report_writer import FileReportWriter

__all__ = ["FileReportWriter"]
