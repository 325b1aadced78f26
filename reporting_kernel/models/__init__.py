"""ORM models for the reporting item store."""

from reporting_kernel.models.reporting_item import ReportingItemRecord

__all__ = ["ReportingItemRecord"]
