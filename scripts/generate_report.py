#!/usr/bin/env python3
"""
Generate a Peppol TSR or EUSR for one calendar month from the item store.

Loads the settings file, reads the month's reporting items from the
configured database, builds the report and prints it as JSON.

Usage:
  python3 scripts/generate_report.py --config reporting.yaml \\
    --report tsr --month 2023-06 [--service-provider POP000001] [--out tsr.json]

Exit status: 0 on success, 1 if the report could not be built.
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from reporting_config import apply_settings, load_settings  # noqa: E402
from reporting_kernel.db.engine import (  # noqa: E402
    create_tables,
    init_engine_from_url,
    session_scope,
)
from reporting_kernel.domain.period import month_of  # noqa: E402
from reporting_kernel.exceptions import (  # noqa: E402
    IncompleteConfigurationError,
    ReportingBackendError,
)
from reporting_kernel.logging_config import configure_logging  # noqa: E402
from reporting_kernel.services.reporting_item_store import ReportingItemStore  # noqa: E402
from reporting_modules.eusr import eusr_builder  # noqa: E402
from reporting_modules.render import render_to_dict  # noqa: E402
from reporting_modules.tsr import tsr_builder  # noqa: E402

BUILDERS = {
    "tsr": tsr_builder,
    "eusr": eusr_builder,
}


def parse_month(value: str) -> date:
    """``YYYY-MM`` -> first day of that month."""
    try:
        year, month = value.split("-")
        return date(int(year), int(month), 1)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}") from None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a Peppol statistics report for one month.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=Path,
        required=True,
        help="Path to the YAML settings file",
    )
    parser.add_argument(
        "--report",
        choices=sorted(BUILDERS),
        default="tsr",
        help="Report type (default: tsr)",
    )
    parser.add_argument(
        "--month",
        type=parse_month,
        required=True,
        help="Reporting month YYYY-MM",
    )
    parser.add_argument(
        "--service-provider",
        default=None,
        help="Only items recorded for this service provider ID",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the JSON report to this file instead of stdout",
    )
    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    configure_logging(level=settings.log_level_number)
    init_engine_from_url(settings.database_url)
    create_tables()

    period = month_of(args.month)
    try:
        with session_scope() as session:
            items = ReportingItemStore(session).load_collection(
                period, args.service_provider
            )
    except ReportingBackendError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    builder = BUILDERS[args.report]().month_of(args.month).items(items)
    apply_settings(builder, settings, getattr(settings, args.report))
    try:
        report = builder.build()
    except IncompleteConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    text = json.dumps(render_to_dict(report), indent=2)
    if args.out:
        args.out.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
