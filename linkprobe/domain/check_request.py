from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse


@dataclass(frozen=True)
class CheckRequest:
    """Input for one check run: a URL or a filesystem path plus crawl options."""

    target: str
    recurse: bool = False
    links_to_skip: tuple[str, ...] = field(default_factory=tuple)
    port: Optional[int] = None

    def __post_init__(self):
        if self.target is None or (isinstance(self.target, str) and self.target.strip() == ""):
            raise ValueError("target is required")
        if self.port is not None and (
            isinstance(self.port, bool) or not isinstance(self.port, int) or not 0 < self.port < 65536
        ):
            raise ValueError(f"port must be between 1 and 65535, got {self.port!r}")
        # accept any iterable of patterns but store an immutable copy
        object.__setattr__(self, "links_to_skip", tuple(self.links_to_skip or ()))

    @property
    def is_url(self) -> bool:
        return urlparse(self.target).scheme in ("http", "https")
