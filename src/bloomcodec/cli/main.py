"""Main CLI entry point for bloomcodec."""

from __future__ import annotations

import argparse
import sys

from .. import __version__
from ..cli.report import inspect_text, print_size
from ..config import CodecConfig
from ..exceptions import BloomcodecError
from ..logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bloomcodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="bloomcodec: Compact Checklist Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bloomcodec --inspect AWM                     Show what a shared value holds
  bloomcodec --inspect AWM --catalog-length 6  Reconcile against a catalog
  bloomcodec --size 174                        Show encoded sizes
  bloomcodec --version                         Show version

Environment:
  BLOOMCODEC_LOG_LEVEL, BLOOMCODEC_LOG_JSON, BLOOMCODEC_CATALOG_LENGTH
        """,
    )

    parser.add_argument(
        "--inspect",
        metavar="TEXT",
        type=str,
        help="Decode a text value and show its status totals",
    )

    parser.add_argument(
        "--catalog-length",
        metavar="N",
        type=int,
        help="Current catalog length used by --inspect",
    )

    parser.add_argument(
        "--size",
        metavar="N",
        type=int,
        help="Show blob and text sizes for a catalog of N entries",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"bloomcodec {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        config = CodecConfig.from_env()
        if args.catalog_length is not None:
            config = CodecConfig(
                log_level=config.log_level,
                log_json=config.log_json,
                catalog_length=args.catalog_length,
            )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(level=config.log_level, format_json=config.log_json)

    if args.inspect is not None:
        try:
            inspect_text(args.inspect, config.catalog_length)
            return 0
        except BloomcodecError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.size is not None:
        try:
            print_size(args.size)
            return 0
        except BloomcodecError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
