"""
Diagnostics channel for completeness checks.

Validation routines take an optional ``Diagnostics`` and report through it;
passing ``None`` keeps them silent without changing their result.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol


class Diagnostics(Protocol):
    """Receiver of validation findings."""

    def warn(self, message: str, **fields: Any) -> None: ...

    def trace(self, message: str, **fields: Any) -> None: ...


class LoggerDiagnostics:
    """Forwards findings to a logger: warnings at WARNING, traces at DEBUG."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def warn(self, message: str, **fields: Any) -> None:
        self._logger.warning(message, extra=fields)

    def trace(self, message: str, **fields: Any) -> None:
        self._logger.debug(message, extra=fields)
