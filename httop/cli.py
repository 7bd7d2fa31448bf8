"""Command-line interface for httop."""

import argparse
import math
import os
import sys

from httop import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser for the httop CLI."""
    parser = argparse.ArgumentParser(
        prog="httop",
        description=(
            "httop v{ver} - parse a .httop request file and optionally "
            "send the request it describes."
        ).format(ver=__version__),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  httop get.httop\n"
            "  httop get.httop --send --timeout 10 "
            "--proxy http://127.0.0.1:8080\n"
        ),
    )

    parser.add_argument(
        "request_file",
        help="Path to the .httop request file.",
    )
    parser.add_argument(
        "--send",
        action="store_true",
        help="Send the parsed request and print the response.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30,
        help="Timeout in seconds when sending (default: 30).",
    )
    parser.add_argument(
        "--proxy",
        default=None,
        help="Route traffic through a proxy (e.g. http://127.0.0.1:8080).",
    )
    parser.add_argument(
        "--insecure",
        action="store_false",
        dest="verify",
        help="Skip TLS certificate verification.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate parsed CLI arguments.

    Raises:
        SystemExit: If the request file is missing or unreadable, or the
            timeout is not a finite positive number.
    """
    if not os.path.isfile(args.request_file):
        print(
            f"Error: Request file not found: '{args.request_file}'",
            file=sys.stderr,
        )
        sys.exit(1)

    if not os.access(args.request_file, os.R_OK):
        print(
            f"Error: Request file is not readable: '{args.request_file}'",
            file=sys.stderr,
        )
        sys.exit(1)

    if not (math.isfinite(args.timeout) and args.timeout > 0):
        print("Error: Timeout must be a positive number.", file=sys.stderr)
        sys.exit(1)


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(args)
    return args
