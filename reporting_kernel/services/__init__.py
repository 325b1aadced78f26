"""Kernel services: write side of the reporting item store."""

from reporting_kernel.services.reporting_item_store import ReportingItemStore

__all__ = ["ReportingItemStore"]
