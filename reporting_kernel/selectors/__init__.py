"""Read-only query selectors."""

from reporting_kernel.selectors.base import BaseSelector
from reporting_kernel.selectors.reporting_item_selector import ReportingItemSelector

__all__ = ["BaseSelector", "ReportingItemSelector"]
