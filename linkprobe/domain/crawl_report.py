"""Crawl report data model."""
from typing import Iterable, NamedTuple

from linkprobe.domain.link_result import LinkResult, LinkState


class CrawlReport(NamedTuple):
    """Final result of a check run.

    This is the only value a run returns; formatters and exit-code
    deciders depend on its shape.
    """
    passed: bool
    """True iff no link ended up BROKEN"""

    links: tuple[LinkResult, ...]
    """One entry per distinct URL, in first-visit order"""

    @classmethod
    def from_links(cls, links: Iterable[LinkResult]) -> "CrawlReport":
        links = tuple(links)
        passed = not any(link.state == LinkState.BROKEN for link in links)
        return cls(passed=passed, links=links)

    @property
    def broken(self) -> list[LinkResult]:
        return [link for link in self.links if link.state == LinkState.BROKEN]

    def to_dict(self) -> dict:
        return {"passed": self.passed, "links": [link.to_dict() for link in self.links]}
