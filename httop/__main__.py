"""httop main entry point."""

import sys

import requests

from httop.cli import parse_cli
from httop.engine import print_report, send_request
from httop.parser import RequestParseError, parse_file


def main(argv: list[str] | None = None) -> int:
    """Run httop.

    Args:
        argv: Optional argument list (defaults to sys.argv).

    Returns:
        Exit code (0 = ok, 1 = HTTP error status, 2 = error).
    """
    args = parse_cli(argv)

    print(f"[*] Parsing request file: {args.request_file}")
    try:
        request = parse_file(args.request_file)
    except RequestParseError as exc:
        print(f"Error parsing request file: {exc.error.value}", file=sys.stderr)
        return 2

    print(f"    Method : {request.method.value}")
    print(f"    URL    : {request.url}")

    if not args.send:
        return 0

    print(f"\n[*] Sending {request.method.value} {request.url}...")
    if args.proxy:
        print(f"    Proxy  : {args.proxy}")

    try:
        result = send_request(
            request,
            timeout=args.timeout,
            proxy=args.proxy,
            verify=args.verify,
        )
    except requests.RequestException as exc:
        print(f"Error sending request: {exc}", file=sys.stderr)
        return 2

    print_report(result)

    return 1 if result.is_error else 0


if __name__ == "__main__":
    sys.exit(main())
