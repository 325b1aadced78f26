"""
Plain-dict rendering of report objects.

The XML serializer is an external collaborator; this rendering exists for
inspection, the CLI's JSON output and tests.  ZERO I/O.

Report objects are frozen dataclasses all the way down, so one recursive
function covers TSR, EUSR and single reporting items.  Leaf types render as:

- ``PeppolIdentifier`` -> ``scheme::value``
- ``date`` -> ISO 8601 date, ``datetime`` -> ISO 8601 with offset
- ``Enum`` -> its value
- tuples and lists -> lists
"""

from __future__ import annotations

import dataclasses
from datetime import date
from enum import Enum
from functools import singledispatch
from typing import Any

from reporting_kernel.domain.identifiers import PeppolIdentifier

Rendered = dict | list | str | int | float | bool | None


@singledispatch
def render_to_dict(obj: Any) -> Rendered:
    """Convert a report (or any part of one) to JSON-compatible values."""
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: render_to_dict(getattr(obj, field.name))
            for field in dataclasses.fields(obj)
        }
    return str(obj)


@render_to_dict.register
def _(obj: PeppolIdentifier) -> str:
    return obj.uri


@render_to_dict.register
def _(obj: date) -> str:
    return obj.isoformat()


@render_to_dict.register
def _(obj: Enum) -> Rendered:
    return obj.value


@render_to_dict.register(list)
@render_to_dict.register(tuple)
def _(obj: list | tuple) -> list:
    return [render_to_dict(value) for value in obj]


@render_to_dict.register
def _(obj: dict) -> dict:
    return {str(key): render_to_dict(value) for key, value in obj.items()}
