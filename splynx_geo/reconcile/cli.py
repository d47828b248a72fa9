#!/usr/bin/env python3
"""
Command-line interface for the Splynx geo-sync.

Usage:
    python -m splynx_geo.reconcile.cli                       # Full run
    python -m splynx_geo.reconcile.cli --dry-run             # No write-backs
    python -m splynx_geo.reconcile.cli --limit 10            # First 10 customers
    python -m splynx_geo.reconcile.cli --output out/geo.csv  # Custom CSV path
"""

import argparse
import logging
import sys

from splynx_geo.core import settings
from splynx_geo.geocoding import build_orchestrator
from splynx_geo.reconcile.driver import Reconciler
from splynx_geo.reconcile.export import CsvExporter
from splynx_geo.splynx import SplynxApiError, SplynxBackend, get_splynx_client

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: str = "geosync.log") -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sync Splynx internet-service addresses and geo markers, and export them to CSV"
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=str(settings.OUTPUT_CSV),
        help="CSV file to write"
    )
    parser.add_argument(
        "--limit", "-l",
        type=int,
        help="Limit number of customers to process"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Don't write anything back to Splynx"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    logger.info("Initializing Splynx API client with Basic Authentication...")
    try:
        backend = SplynxBackend(get_splynx_client())
    except SplynxApiError as e:
        logger.error(str(e))
        return 1

    reconciler = Reconciler(
        backend,
        build_orchestrator(),
        CsvExporter(args.output),
        dry_run=args.dry_run,
        limit=args.limit,
    )

    try:
        reconciler.run()
    except SplynxApiError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Data successfully written to '{args.output}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
