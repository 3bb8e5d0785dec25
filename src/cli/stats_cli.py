"""
Command-line interface for the sales statistics pipeline.

Usage:
    python -m src.cli.stats_cli compute [--input <file> | --url <url>] [options]
"""

import argparse
import json
import os
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from src.analytics import FileOrderSource, HttpOrderSource, OrderNormalizer, StatisticsSession
from src.core.config import ViewConfigBuilder, ViewConfigLoader
from src.core.dates import DateSynthesizer
from src.core.exceptions import DataUnavailableError
from src.core.models import ViewConfig
from src.observability.logger import configure_logging, get_logger


logger = get_logger(__name__)


def build_view_config(args) -> ViewConfig:
    """
    Combine the YAML file (if any) with command-line selections.

    Flags given on the command line override the file.
    """
    if args.config:
        base = ViewConfigLoader(args.config).load()
        options = base.model_dump(exclude_none=True)
    else:
        options = {}

    if args.threshold:
        options["amount_threshold"] = args.threshold
    if args.sort:
        options["sort_order"] = args.sort
    if args.date_mode:
        options["date_mode"] = args.date_mode
        if args.date_mode != "custom-range":
            options.pop("custom_range", None)

    builder = ViewConfigBuilder()
    builder.options.update(options)
    if args.start or args.end:
        if not (args.start and args.end):
            raise ValueError("--start and --end must be given together")
        builder.between(args.start, args.end)
    return builder.build()


def compute_command(args) -> int:
    """
    Fetch orders once, compute one view and print it as JSON.

    Returns:
        Process exit status
    """
    try:
        config = build_view_config(args)
    except (ValueError, ValidationError, FileNotFoundError) as e:
        logger.error(f"Invalid view configuration: {e}")
        return 1

    try:
        seed = args.seed
        if seed is None and os.getenv("STATS_SEED"):
            seed = int(os.getenv("STATS_SEED"))

        if args.input:
            source = FileOrderSource(args.input)
        else:
            source = HttpOrderSource(url=args.url)
    except ValueError as e:
        logger.error(f"Invalid environment setting: {e}")
        return 1

    session = StatisticsSession(
        source=source,
        normalizer=OrderNormalizer(DateSynthesizer.seeded(seed)),
    )

    session.load()
    try:
        view = session.compute(config)
    except DataUnavailableError as e:
        logger.error(f"Data unavailable: {e}")
        return 1

    if view.skipped_count:
        logger.warning(f"Skipped {view.skipped_count} invalid orders")

    print(json.dumps(view.to_payload(), indent=args.indent))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sales statistics over coffee-shop orders",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Everything from the demo carts API
  python -m src.cli.stats_cli compute

  # Orders over $100 from the last week, biggest first
  python -m src.cli.stats_cli compute --input data/carts.json \\
      --threshold '>100' --date-mode last-7d --sort descending

  # Custom range (bare dates cover whole days), reproducible dates
  python -m src.cli.stats_cli compute --input data/carts.json \\
      --start 2026-10-01 --end 2026-10-19 --seed 7

  # Selections from a YAML file
  python -m src.cli.stats_cli compute --config config/view.yaml
        """
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: env LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: env LOG_FORMAT or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    compute_parser = subparsers.add_parser("compute", help="Compute one statistics view")
    source_group = compute_parser.add_mutually_exclusive_group()
    source_group.add_argument("--input", help="JSON file with orders (list or carts envelope)")
    source_group.add_argument("--url", help="Order endpoint (default: env ORDERS_URL or the demo carts API)")
    compute_parser.add_argument("--config", help="YAML file with a 'view' section")
    compute_parser.add_argument(
        "--threshold",
        choices=["none", ">100", ">500", ">1000"],
        help="Keep orders whose total exceeds this amount"
    )
    compute_parser.add_argument(
        "--date-mode",
        choices=["all", "last-24h", "last-7d", "last-30d", "custom-range"],
        help="Date window (implied custom-range when --start/--end are given)"
    )
    compute_parser.add_argument("--start", help="Custom range start (ISO date or datetime)")
    compute_parser.add_argument("--end", help="Custom range end, inclusive (ISO date or datetime)")
    compute_parser.add_argument(
        "--sort",
        choices=["none", "ascending", "descending"],
        help="Order by total (ignored for custom ranges)"
    )
    compute_parser.add_argument("--seed", type=int, default=None, help="Seed for synthesized order dates")
    compute_parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main CLI entry point."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        configure_logging(level=args.log_level, format_type=args.log_format)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "compute":
        sys.exit(compute_command(args))


if __name__ == "__main__":
    main()
