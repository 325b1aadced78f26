"""
Identifiers -- Scheme-qualified Peppol identifiers and well-known constants.

Responsibility:
    Provides the ``PeppolIdentifier`` value object used for participants,
    document types and processes, plus the fixed scheme and protocol
    identifiers the reports refer to.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Failure modes:
    - ValidationError on construction with an empty scheme or value.
    - ValidationError from ``parse`` when the URI lacks the ``::`` separator.
"""

from __future__ import annotations

from dataclasses import dataclass

from reporting_kernel.exceptions import ValidationError

# Identifier schemes
PARTICIPANT_SCHEME_ISO6523 = "iso6523-actorid-upis"
DOCTYPE_SCHEME_BUSDOX = "busdox-docid-qns"
PROCESS_SCHEME_CENBII = "cenbii-procid-ubl"

# Transport protocols
TRANSPORT_PROTOCOL_PEPPOL_AS4_V2 = "peppol-transport-as4-v2_0"

# Scheme of the reporting service provider ID (certificate subject CN)
SERVICE_PROVIDER_ID_SCHEME = "CertSubjectCN"

URI_SEPARATOR = "::"


def has_text(value: str | None) -> bool:
    """True if value is a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True, slots=True)
class PeppolIdentifier:
    """
    Scheme-qualified identifier (value + scheme ID pair).

    Contract:
        Both ``scheme`` and ``value`` must contain text. Instances are
        immutable and hashable so they can be used in group keys.
    """

    scheme: str
    value: str

    def __post_init__(self) -> None:
        if not has_text(self.scheme):
            raise ValidationError("identifier scheme", "must not be empty")
        if not has_text(self.value):
            raise ValidationError("identifier value", "must not be empty")

    @property
    def uri(self) -> str:
        return f"{self.scheme}{URI_SEPARATOR}{self.value}"

    @classmethod
    def parse(cls, uri: str) -> PeppolIdentifier:
        """Parse ``scheme::value``. The value itself may contain ``::``."""
        if not isinstance(uri, str) or URI_SEPARATOR not in uri:
            raise ValidationError("identifier URI", f"{uri!r} is not scheme::value")
        scheme, value = uri.split(URI_SEPARATOR, 1)
        return cls(scheme=scheme, value=value)

    def __str__(self) -> str:
        return self.uri


def participant_id(value: str) -> PeppolIdentifier:
    return PeppolIdentifier(PARTICIPANT_SCHEME_ISO6523, value)


def document_type_id(value: str) -> PeppolIdentifier:
    return PeppolIdentifier(DOCTYPE_SCHEME_BUSDOX, value)


def process_id(value: str) -> PeppolIdentifier:
    return PeppolIdentifier(PROCESS_SCHEME_CENBII, value)
