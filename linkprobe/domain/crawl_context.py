from typing import NamedTuple, Optional

from linkprobe.domain.check_request import CheckRequest
from linkprobe.domain.link_result import LinkResult
from linkprobe.domain.visited_tracker import VisitedTracker


class TraversalFrame(NamedTuple):
    url: str
    should_crawl_children: bool


class CrawlContext:
    """State owned by one check run and shared by the whole traversal."""

    def __init__(self, request: CheckRequest, root_url: str, skip_policy, visited_tracker: Optional[VisitedTracker] = None):
        self.request = request
        # target after a local path has been rewritten to the served URL
        self.root_url = root_url
        self.skip_policy = skip_policy
        self.visited = visited_tracker or VisitedTracker()
        self.results: list[LinkResult] = []

    def mark_visited(self, url: str):
        self.visited.mark(url)

    def is_visited(self, url: str) -> bool:
        return self.visited.is_visited(url)

    def record(self, result: LinkResult):
        self.results.append(result)

    def should_crawl_children(self, url: str) -> bool:
        """Children are expanded only with recursion on and under the root prefix."""
        return bool(self.request.recurse) and url.startswith(self.root_url)
