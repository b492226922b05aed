"""Report rendering services."""

from .report_service import ReportService

__all__ = ["ReportService"]
