"""httop: parse .httop request files."""

__version__ = "0.1.0"
