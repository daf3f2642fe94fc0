#!/usr/bin/env python3
"""
Sales Reports CLI — seed the database, print or export monthly reports, run the API.

USAGE:
  python -m sales_reports.cli seed                         # Replace dataset from SEED_URL
  python -m sales_reports.cli seed --url http://.../x.json

  python -m sales_reports.cli report march                 # Combined JSON for March
  python -m sales_reports.cli report march --listing       # ...plus every March transaction

  python -m sales_reports.cli export march                 # Excel report to REPORTS_FOLDER
  python -m sales_reports.cli export march --output ./out.xlsx

  python -m sales_reports.cli serve                        # Start API server
  python -m sales_reports.cli serve --port 5000
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from pymongo.errors import PyMongoError

from sales_reports.config import REPORTS_FOLDER, SEED_URL
from sales_reports.logging_config import setup_logging
from sales_reports.data.loader import LoadError, seed
from sales_reports.data.schemas import InvalidMonthError, month_index, month_label
from sales_reports.data.store import TransactionStore

logger = logging.getLogger(__name__)


def _month(value: str) -> int:
    try:
        return month_index(value)
    except InvalidMonthError:
        raise argparse.ArgumentTypeError(f"not a month name: {value!r}")


def cmd_seed(args, store: TransactionStore) -> int:
    """Replace the dataset."""
    count = seed(store, args.url)
    print(f"Seeded {count:,} transactions from {args.url}")
    return 0


def cmd_report(args, store: TransactionStore) -> int:
    """Print the monthly report as JSON."""
    from sales_reports.reports.monthly_report import generate_json
    data = generate_json(store, args.month)
    if not args.listing:
        data.pop("transactions")
    print(json.dumps(data, indent=2, default=str))
    return 0


def cmd_export(args, store: TransactionStore) -> int:
    """Write the monthly Excel report."""
    from sales_reports.reports.monthly_report import generate_excel
    out = Path(args.output) if args.output else REPORTS_FOLDER / f"Sales_Report_{month_label(args.month)}.xlsx"
    path = generate_excel(store, args.month, out)
    print(f"Saved {path}")
    return 0


def cmd_serve(args, store=None) -> int:
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Sales Reports API on port {args.port}...")
    uvicorn.run("sales_reports.main:app", host=args.host, port=args.port, reload=args.reload,
                timeout_keep_alive=65)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sales Reports — monthly transaction analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    seed_parser = subparsers.add_parser("seed", help="Replace the dataset from the seed URL")
    seed_parser.add_argument("--url", default=SEED_URL, help="Dataset URL")
    seed_parser.set_defaults(func=cmd_seed)

    report_parser = subparsers.add_parser("report", help="Print a monthly report as JSON")
    report_parser.add_argument("month", type=_month, help="Month name, e.g. march")
    report_parser.add_argument("--listing", action="store_true", help="Include every transaction")
    report_parser.set_defaults(func=cmd_report)

    export_parser = subparsers.add_parser("export", help="Write a monthly Excel report")
    export_parser.add_argument("month", type=_month, help="Month name, e.g. march")
    export_parser.add_argument("--output", help="Output .xlsx path")
    export_parser.set_defaults(func=cmd_export)

    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--host", default="0.0.0.0")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None, store: TransactionStore | None = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    if args.func is cmd_serve:
        return cmd_serve(args)

    store = store or TransactionStore.connect()
    try:
        return args.func(args, store)
    except (LoadError, PyMongoError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
