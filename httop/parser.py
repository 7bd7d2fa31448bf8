"""Request file parsing.

Converts a ``.httop`` request file into a structured ``Request``::

    # comment lines are ignored
    --method
    GET
    --
    --url
    https://example.com
"""

from __future__ import annotations

import enum
import os

METHOD_KEY = "--method"
URL_KEY = "--url"
TERMINATOR = "--"

# Unicode White_Space; str.strip() would also drop the \x1c-\x1f separators
WHITESPACE = (
    " \t\n\x0b\x0c\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class RequestMethod(enum.Enum):
    """HTTP methods accepted in a request file."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


# Upper-cased method name -> RequestMethod
METHODS: dict[str, RequestMethod] = {m.value: m for m in RequestMethod}


class ParseError(enum.Enum):
    """Kind of failure reported by ``parse_file``."""

    INVALID_FILE_PATH = "invalid file path"
    INVALID_METHOD = "invalid method"
    INVALID_URL = "invalid url"


class RequestParseError(ValueError):
    """Raised when a request file cannot be turned into a ``Request``."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.value)
        self.error = error


class MarkerNotFound(ValueError):
    """Raised by ``extract_key`` when a key or its terminator is missing."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key marker not found: {key!r}")
        self.key = key


class Request:
    """A parsed request: method plus opaque URL text."""

    __slots__ = ("method", "url")

    def __init__(self, method: RequestMethod, url: str) -> None:
        object.__setattr__(self, "method", method)
        object.__setattr__(self, "url", url)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Request is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Request is immutable, cannot delete {name!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Request):
            return NotImplemented
        return self.method == other.method and self.url == other.url

    def __hash__(self) -> int:
        return hash((self.method, self.url))

    def __repr__(self) -> str:
        return f"Request(method={self.method.value}, url={self.url!r})"


def strip_comments(text: str) -> str:
    """Drop every line whose first non-blank character is ``#``.

    Lines end at a newline only, with one trailing carriage return removed,
    so other control characters stay inside their line.
    """
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    kept = []
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        if not line.lstrip(WHITESPACE).startswith("#"):
            kept.append(line)
    return "\n".join(kept)


def extract_key(text: str, key: str) -> str:
    """Extract the value that follows ``key`` in ``text``.

    The extraction depends on where the key sits:
      - Key at the very start of the text: the value runs up to the next
        ``--`` terminator, which must be present.
      - Anything before the key: the key is taken to be the last field and
        the value runs to the end of the text.

    Args:
        text: Request file contents with comments already stripped.
        key: The key marker, e.g. ``--method``.

    Returns:
        The value with surrounding whitespace removed.

    Raises:
        MarkerNotFound: If the key is absent, or a leading key has no
            terminator after it.
    """
    idx = text.find(key)
    if idx == -1:
        raise MarkerNotFound(key)

    prefix, rest = text[:idx], text[idx:]

    if not prefix:
        rest = rest[len(key) :].strip(WHITESPACE)
        end = rest.find(TERMINATOR)
        if end == -1:
            raise MarkerNotFound(key)
        return rest[:end].strip(WHITESPACE)

    rest = rest.strip(WHITESPACE)[len(key) :]
    return rest.strip(WHITESPACE)


def parse_text(text: str) -> Request:
    """Build a ``Request`` from request file contents.

    Raises:
        RequestParseError: With ``INVALID_METHOD`` or ``INVALID_URL``.
    """
    cleaned = strip_comments(text)

    try:
        raw_method = extract_key(cleaned, METHOD_KEY)
    except MarkerNotFound:
        raise RequestParseError(ParseError.INVALID_METHOD) from None

    method = METHODS.get(raw_method.upper())
    if method is None:
        raise RequestParseError(ParseError.INVALID_METHOD)

    try:
        url = extract_key(cleaned, URL_KEY)
    except MarkerNotFound:
        raise RequestParseError(ParseError.INVALID_URL) from None

    return Request(method=method, url=url)


def parse_file(path: str) -> Request:
    """Read and parse a request file.

    Args:
        path: Path to the ``.httop`` file.

    Returns:
        The parsed Request.

    Raises:
        RequestParseError: ``INVALID_FILE_PATH`` if the file cannot be read
            or decoded, otherwise whatever ``parse_text`` reports.
    """
    try:
        contents = load_request_file(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise RequestParseError(ParseError.INVALID_FILE_PATH) from exc

    return parse_text(contents)


def load_request_file(filepath: str) -> str:
    """Read and return the contents of a request file.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    with open(filepath, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def get_current_working_dir() -> str:
    """Return the process working directory.

    Raises:
        RequestParseError: ``INVALID_FILE_PATH`` if it is unavailable.
    """
    try:
        return os.getcwd()
    except OSError as exc:
        raise RequestParseError(ParseError.INVALID_FILE_PATH) from exc
