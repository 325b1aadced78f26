"""
Reporting Kernel

Aggregation engine for the Peppol statistical reports:
- Immutable reporting items and item collections
- Deterministic grouping and counting
- Builder framework with completeness diagnostics
- Storage of reporting items per period
"""

__version__ = "0.1.0"
