"""
Typed Exception Hierarchy for the Reporting Kernel.

Every error carries a machine-readable ``code`` class attribute and keeps its
context as attributes, so callers catch by type and read structured data
instead of parsing messages.

    ReportingKernelError (base)
    |
    +-- ValidationError                 malformed item / identifier / period
    +-- IncompleteConfigurationError    build() on an incomplete builder
    +-- ReportingBackendError           storage collaborator failure

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Code                        | When Raised
----------------------------|-----------------------------------------------
VALIDATION_ERROR            | Item field missing/invalid, null item in batch
INCOMPLETE_CONFIGURATION    | Mandatory builder field missing or inconsistent
REPORTING_BACKEND_ERROR     | Storing or loading reporting items failed

===============================================================================
HANDLING PATTERNS
===============================================================================

    try:
        report = builder.build()
    except IncompleteConfigurationError as e:
        # e.field names the first failing field in check order
        builder.is_complete(True)  # logs the diagnosis

ValidationError is not recoverable for the offending input: fix or filter the
upstream data.  The kernel never retries; retries belong to the storage
collaborator.
"""


class ReportingKernelError(Exception):
    """
    Base exception for all reporting kernel errors.

    All subclasses must have a ``code`` class attribute.
    """

    code: str = "REPORTING_KERNEL_ERROR"


class ValidationError(ReportingKernelError):
    """Input value failed structural validation."""

    code: str = "VALIDATION_ERROR"

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class IncompleteConfigurationError(ReportingKernelError):
    """
    A report builder was asked to build without all mandatory fields.

    Recoverable: call ``is_complete(True)`` to diagnose, supply the missing
    field and build again.
    """

    code: str = "INCOMPLETE_CONFIGURATION"

    def __init__(self, report_type: str, field: str | None = None):
        self.report_type = report_type
        self.field = field
        detail = f" ({field})" if field else ""
        super().__init__(
            f"The {report_type} builder was not filled completely{detail}"
        )


class ReportingBackendError(ReportingKernelError):
    """The storage collaborator failed to store or load reporting items."""

    code: str = "REPORTING_BACKEND_ERROR"

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Reporting backend {operation} failed: {reason}")
