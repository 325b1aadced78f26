"""
Report modules.

One package per report type (``tsr``, ``eusr``), each providing defaults,
models, aggregation and a builder on top of ``reporting_kernel``.
"""
