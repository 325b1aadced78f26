"""
Settings Loader (``reporting_config.loader``).

Responsibility
--------------
Loads a YAML settings file and parses it into ``ReportingSettings``.

Invariants enforced
-------------------
* Parse errors raise ``ValueError`` or ``KeyError`` with descriptive
  messages; no silent defaults for required fields.
* The parsed object is a frozen dataclass from ``schema.py``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing ``reporter.id``  -> ``KeyError``.
* Unknown keys  -> ``ValueError`` (typos must not pass as defaults).

Expected layout::

    reporter:
      id: POP000001
      scheme: CertSubjectCN      # optional
    storage:
      database_url: sqlite:///reporting.db
    logging:
      level: INFO
    reports:
      tsr:
        customization_id: ...    # optional override
      eusr:
        profile_id: ...          # optional override
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from reporting_config.schema import ReportingSettings, ReportOverrides
from reporting_kernel.logging_config import get_logger

logger = get_logger("config.loader")

_TOP_LEVEL_KEYS = frozenset({"reporter", "storage", "logging", "reports"})
_OVERRIDE_KEYS = frozenset({"customization_id", "profile_id"})


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _check_keys(section: str, data: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = set(data) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in {section}: {', '.join(sorted(unknown))}")


def parse_overrides(section: str, data: dict[str, Any] | None) -> ReportOverrides:
    if not data:
        return ReportOverrides()
    _check_keys(section, data, _OVERRIDE_KEYS)
    return ReportOverrides(
        customization_id=data.get("customization_id"),
        profile_id=data.get("profile_id"),
    )


def parse_settings(data: dict[str, Any]) -> ReportingSettings:
    """
    Parse ``ReportingSettings`` from a dict.

    Raises:
        KeyError: if ``reporter.id`` is missing.
        ValueError: on unknown keys or invalid values.
    """
    _check_keys("settings", data, _TOP_LEVEL_KEYS)
    reporter = data["reporter"]
    storage = data.get("storage") or {}
    logging_section = data.get("logging") or {}
    reports = data.get("reports") or {}
    _check_keys("reports", reports, frozenset({"tsr", "eusr"}))

    kwargs: dict[str, Any] = {"reporter_id": str(reporter["id"])}
    if reporter.get("scheme"):
        kwargs["reporter_id_scheme"] = reporter["scheme"]
    if storage.get("database_url"):
        kwargs["database_url"] = storage["database_url"]
    if logging_section.get("level"):
        kwargs["log_level"] = str(logging_section["level"])

    return ReportingSettings(
        **kwargs,
        tsr=parse_overrides("reports.tsr", reports.get("tsr")),
        eusr=parse_overrides("reports.eusr", reports.get("eusr")),
    )


def load_settings(path: Path) -> ReportingSettings:
    """Load and parse a settings file."""
    settings = parse_settings(load_yaml_file(path))
    logger.info(
        "reporting_settings_loaded",
        extra={"path": str(path), "reporter_id": settings.reporter_id},
    )
    return settings
