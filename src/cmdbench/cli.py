"""CLI for cmdbench."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from cmdbench.config import load_export_config
from cmdbench.errors import ExportError
from cmdbench.report.aggregate import load_results
from cmdbench.report.export import ExportFormat, export

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cmd_export(args) -> int:
    """Export benchmark results as a report."""
    try:
        config = load_export_config(
            args.config,
            export_format=args.format,
            time_unit=args.time_unit,
            sort_order=args.sort,
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        results = load_results(args.results)
    except (OSError, KeyError, ValueError) as e:
        logger.error(f"Cannot load results from {args.results}: {e}")
        return 1

    try:
        report = export(results, config.format, config.unit, config.sort)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        return 1

    if args.output is None:
        sys.stdout.buffer.write(report)
        sys.stdout.flush()
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(report)
        logger.info(f"Report written to {args.output}")

    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="cmdbench: render command benchmark results as tables"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # export
    parser_export = subparsers.add_parser("export", help="Export benchmark results")
    parser_export.add_argument("--results", type=Path, required=True, help="JSON file with benchmark results")
    parser_export.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=None,
        help="Report format (default: markdown)",
    )
    parser_export.add_argument("--time-unit", default=None, help="Time unit: s, ms, µs or auto")
    parser_export.add_argument("--sort", default=None, help="Row order: command or mean-time")
    parser_export.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser_export.add_argument("--output", type=Path, default=None, help="Output file (default: stdout)")
    parser_export.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
