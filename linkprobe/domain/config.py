from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class CheckConfig:
    """Defaults for a check run as read from a config file.

    Every field is optional so that command line flags can be layered
    on top; `None` means "not set here".
    """

    config_path: Optional[str] = None
    recurse: Optional[bool] = None
    skip: tuple[str, ...] = field(default_factory=tuple)
    format: Optional[str] = None
    silent: Optional[bool] = None
    port: Optional[int] = None

    def __repr__(self):
        return f"<CheckConfig path={self.config_path} recurse={self.recurse} skip={list(self.skip)}>"
