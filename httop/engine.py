"""Request dispatch.

Sends a parsed ``Request`` with the requests library and renders the
response for the terminal.
"""

from __future__ import annotations

import urllib3

import requests

from httop.parser import Request

# Number of body characters shown in the report
BODY_PREVIEW_CHARS = 500


class SendResult:
    """Container for the response to a dispatched request."""

    __slots__ = (
        "status_code",
        "reason",
        "headers",
        "body",
        "elapsed",
    )

    def __init__(
        self,
        status_code: int,
        reason: str,
        headers: dict[str, str],
        body: str,
        elapsed: float,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.headers = headers
        self.body = body
        self.elapsed = elapsed

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400


def build_proxies(proxy: str | None) -> dict[str, str] | None:
    """Map a single proxy URL onto both schemes, or None without a proxy."""
    if not proxy:
        return None
    return {"http": proxy, "https": proxy}


def send_request(
    request: Request,
    timeout: float = 30,
    proxy: str | None = None,
    verify: bool = True,
) -> SendResult:
    """Send the request and collect the response.

    The URL is passed through untouched; redirects are not followed.

    Args:
        request: The parsed request.
        timeout: Request timeout in seconds.
        proxy: Optional proxy URL for debugging.
        verify: Whether to verify TLS certificates.

    Returns:
        A SendResult describing the response.

    Raises:
        requests.RequestException: On connection or protocol failures.
    """
    if not verify:
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    response = requests.request(
        method=request.method.value,
        url=request.url,
        proxies=build_proxies(proxy),
        timeout=timeout,
        verify=verify,
        allow_redirects=False,
    )

    return SendResult(
        status_code=response.status_code,
        reason=response.reason,
        headers=dict(response.headers),
        body=response.text,
        elapsed=response.elapsed.total_seconds(),
    )


def print_report(result: SendResult) -> None:
    """Print the response summary to stdout."""
    banner = "=" * 60
    print(f"\n{banner}")
    print(f"  HTTP {result.status_code} {result.reason} ({result.elapsed:.3f}s)")
    print(banner)

    if result.headers:
        print("\n  Response Headers:")
        for key, value in result.headers.items():
            print(f"    {key}: {value}")

    if result.body:
        print(
            f"\n  Response Body (first {BODY_PREVIEW_CHARS} chars):\n"
            f"    {result.body[:BODY_PREVIEW_CHARS]}"
        )

    print(f"\n{banner}\n")
