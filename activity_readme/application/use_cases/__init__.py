from .generate_report_use_case import GenerateActivityReportUseCase

__all__ = ["GenerateActivityReportUseCase"]
