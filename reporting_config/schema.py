"""
ReportingSettings schema.

The human-authored settings of one reporting service provider: who reports,
where the reporting items are stored and, rarely, overrides of the schema
identifiers.  YAML files are parsed into this type by the loader.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from reporting_kernel.domain.identifiers import SERVICE_PROVIDER_ID_SCHEME

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ReportOverrides:
    """Optional replacements for a report type's fixed identifiers."""

    customization_id: str | None = None
    profile_id: str | None = None


@dataclass(frozen=True)
class ReportingSettings:
    """Settings of one reporting service provider."""

    reporter_id: str
    database_url: str = "sqlite://"
    reporter_id_scheme: str = SERVICE_PROVIDER_ID_SCHEME
    log_level: str = "INFO"
    tsr: ReportOverrides = ReportOverrides()
    eusr: ReportOverrides = ReportOverrides()

    def __post_init__(self):
        if not self.reporter_id or not self.reporter_id.strip():
            raise ValueError("reporter_id must not be empty")
        if not self.reporter_id_scheme or not self.reporter_id_scheme.strip():
            raise ValueError("reporter_id_scheme must not be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())
