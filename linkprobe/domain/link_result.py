from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LinkState(str, Enum):
    OK = "OK"
    BROKEN = "BROKEN"
    SKIPPED = "SKIPPED"


@dataclass(frozen=True)
class LinkResult:
    """Outcome of checking a single URL during a run."""

    url: str
    status: Optional[int] = None
    state: LinkState = LinkState.BROKEN

    def to_dict(self) -> dict:
        data = {"url": self.url}
        if self.status is not None:
            data["status"] = self.status
        data["state"] = self.state.value
        return data

    def __repr__(self):
        return f"<LinkResult {self.state.value} status={self.status} url={self.url}>"
