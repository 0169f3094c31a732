import logging
from typing import Optional

from linkprobe.domain.crawl_context import CrawlContext, TraversalFrame
from linkprobe.domain.link_result import LinkResult, LinkState
from linkprobe.services.fetcher import Fetcher
from linkprobe.services.protocols import CrawlListener, LinkExtractor, NullListener

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a crawl given configured collaborators.

    This class owns the crawl control-flow (depth-first traversal, dedup,
    skip filtering, recursion eligibility and progress events). It
    intentionally does NOT construct dependencies or manage the local
    server; that stays in `LinkChecker` and the DI layer.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        link_extractor: LinkExtractor,
        listener: Optional[CrawlListener] = None,
    ):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.listener = listener or NullListener()

    def _notify_link(self, result: LinkResult) -> None:
        try:
            self.listener.on_link(result)
        except Exception as e:
            logger.warning("Listener failed on link %s: %s", result.url, e)

    def _notify_page_start(self, url: str) -> None:
        try:
            self.listener.on_page_start(url)
        except Exception as e:
            logger.warning("Listener failed on page start %s: %s", url, e)

    def crawl(self, context: CrawlContext) -> list[LinkResult]:
        """Walk the link graph from `context.root_url` and return results in visit order.

        The root page's children are always checked; pages below it are only
        expanded when recursion is on and they live under the root prefix.
        """
        stack = [TraversalFrame(context.root_url, True)]
        while stack:
            frame = stack.pop()
            children = self.crawl_from(frame, context)
            # reversed so the first child is visited next (pre-order DFS)
            stack.extend(reversed(children))
        return context.results

    def crawl_from(self, frame: TraversalFrame, context: CrawlContext) -> list[TraversalFrame]:
        """Handle one URL and return the frames for its children, if any."""
        url = frame.url
        if context.is_visited(url):
            logger.debug("Skipping (visited) %s", url)
            return []
        context.mark_visited(url)

        if context.skip_policy.should_skip(url):
            result = LinkResult(url=url, status=None, state=LinkState.SKIPPED)
            context.record(result)
            self._notify_link(result)
            return []

        fetched = self.fetcher.fetch(url, frame.should_crawl_children)
        result = fetched.link_result
        context.record(result)
        self._notify_link(result)

        if not (frame.should_crawl_children and fetched.is_html):
            return []

        self._notify_page_start(url)
        children = self.link_extractor.extract(fetched.body, url)
        logger.debug("Found %s links on %s", len(children), url)
        return [TraversalFrame(child, context.should_crawl_children(child)) for child in children]
