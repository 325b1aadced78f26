"""
reporting_config -- settings of the reporting service provider.

Responsibility:
    Loads the YAML settings file and pushes its values into report
    builders.  The kernel MUST NEVER import from ``reporting_config``.

Failure modes:
    - ``FileNotFoundError`` / ``yaml.YAMLError`` from loading.
    - ``KeyError`` / ``ValueError`` from parsing.
"""

from __future__ import annotations

from typing import TypeVar

from reporting_config.loader import load_settings, load_yaml_file, parse_settings
from reporting_config.schema import ReportingSettings, ReportOverrides
from reporting_kernel.domain.builder import ReportBuilder

BuilderT = TypeVar("BuilderT", bound=ReportBuilder)


def apply_settings(
    builder: BuilderT,
    settings: ReportingSettings,
    overrides: ReportOverrides | None = None,
) -> BuilderT:
    """Set reporter identity and any identifier overrides on ``builder``."""
    builder.reporter_id(settings.reporter_id).reporter_id_scheme(
        settings.reporter_id_scheme
    )
    if overrides is not None:
        if overrides.customization_id:
            builder.customization_id(overrides.customization_id)
        if overrides.profile_id:
            builder.profile_id(overrides.profile_id)
    return builder


__all__ = [
    "ReportingSettings",
    "ReportOverrides",
    "apply_settings",
    "load_settings",
    "load_yaml_file",
    "parse_settings",
]
