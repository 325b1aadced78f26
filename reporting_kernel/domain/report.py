"""
Report building blocks shared by every report type.

Frozen value objects only.  Field names follow the published report
schemas: the header carries the period and the scheme-qualified reporter ID,
subset keys carry a value with its schemeID and metaSchemeID.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reporting_kernel.domain.aggregation import Dimension, GroupAggregate, key_text
from reporting_kernel.domain.identifiers import PeppolIdentifier
from reporting_kernel.domain.period import ReportPeriod


@dataclass(frozen=True)
class ReportHeader:
    """Header: report period plus reporter ID and its scheme."""

    period: ReportPeriod
    reporter_id: str
    reporter_id_scheme: str


@dataclass(frozen=True)
class SubsetKey:
    """One ``Key`` element of a subset."""

    meta_scheme_id: str
    scheme_id: str
    value: str


# Dimension -> (metaSchemeID, schemeID for non-identifier values)
_KEY_SCHEMES: dict[Dimension, tuple[str, str]] = {
    Dimension.END_USER_COUNTRY: ("CC", "EndUserCountry"),
    Dimension.DOCUMENT_TYPE: ("DT", ""),
    Dimension.PROCESS: ("PR", ""),
    Dimension.DIRECTION: ("DIR", "Direction"),
    Dimension.TRANSPORT_PROTOCOL: ("TP", "Peppol"),
}


def subset_type(dimensions: tuple[Dimension, ...]) -> str:
    """Subset type attribute, e.g. ``PerTP`` or ``PerCC-DT-PR-DIR``."""
    return "Per" + "-".join(_KEY_SCHEMES[d][0] for d in dimensions)


def subset_keys(aggregate: GroupAggregate) -> tuple[SubsetKey, ...]:
    """
    Render the group key of ``aggregate`` as subset keys.

    Identifier values keep their own scheme as schemeID.
    """
    keys: list[SubsetKey] = []
    for dimension, value in zip(aggregate.dimensions, aggregate.key):
        meta, scheme = _KEY_SCHEMES[dimension]
        if isinstance(value, PeppolIdentifier):
            keys.append(SubsetKey(meta, value.scheme, value.value))
        else:
            keys.append(SubsetKey(meta, scheme, key_text(value)))
    return tuple(keys)


def key_value(keys: tuple[SubsetKey, ...], meta_scheme_id: str) -> Any:
    """Value of the first key with the given metaSchemeID, or None."""
    for key in keys:
        if key.meta_scheme_id == meta_scheme_id:
            return key.value
    return None
