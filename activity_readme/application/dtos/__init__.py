from .github_event_dto import GitHubEventDTO, GitHubRepoDTO
from .report_dto import ReportResultDTO

__all__ = ["GitHubEventDTO", "GitHubRepoDTO", "ReportResultDTO"]
