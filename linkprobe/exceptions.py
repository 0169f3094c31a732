"""Custom exceptions for linkprobe."""
from typing import Optional


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class InvalidSkipPatternError(ValueError):
    """Raised when a skip pattern is not a valid regular expression."""

    def __init__(self, pattern: str, original: Exception):
        self.pattern = pattern
        self.original = original
        super().__init__(f"Invalid skip pattern {pattern!r}: {original}")


class LocalServerError(Exception):
    """Raised when the local static server cannot be started."""

    def __init__(self, root: str, port: Optional[int], original: Exception):
        self.root = root
        self.port = port
        self.original = original
        super().__init__(f"Could not serve {root!r} on port {port if port is not None else 'auto'}: {original}")


class ConfigFileError(Exception):
    """Raised when a requested config file cannot be loaded."""

    def __init__(self, config_path: str, reason: str = "not found"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")
