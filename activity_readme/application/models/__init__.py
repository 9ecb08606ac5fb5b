from .report_options import ReportOptions

__all__ = ["ReportOptions"]
