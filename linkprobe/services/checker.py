import logging
from typing import Optional

from linkprobe.domain.check_request import CheckRequest
from linkprobe.domain.crawl_context import CrawlContext
from linkprobe.domain.crawl_report import CrawlReport
from linkprobe.services.crawl_executor import CrawlExecutor
from linkprobe.services.fetcher import Fetcher
from linkprobe.services.local_server import LocalStaticServer
from linkprobe.services.protocols import CrawlListener, LinkExtractor
from linkprobe.services.skip_policy import SkipPolicy

logger = logging.getLogger(__name__)


class LinkChecker:
    """Entry point for a check run.

    Validates skip patterns, serves a local path when the target is not a
    URL, runs the crawl and assembles the report. The local server is
    stopped on every exit path, including when the crawl raises.
    """

    def __init__(self, *, fetcher: Fetcher, link_extractor: LinkExtractor, server_factory=LocalStaticServer):
        self.fetcher = fetcher
        self.link_extractor = link_extractor
        self.server_factory = server_factory

    def check(self, request: CheckRequest, listener: Optional[CrawlListener] = None) -> CrawlReport:
        if request is None:
            raise ValueError("request is required for check")

        # invalid patterns must fail before any server or network I/O
        skip_policy = SkipPolicy(request.links_to_skip)

        server = None
        root_url = request.target
        if not request.is_url:
            server = self.server_factory(request.target, request.port)
            server.start()
            root_url = server.url

        try:
            logger.info("Checking %s (recurse=%s)", root_url, request.recurse)
            context = CrawlContext(request, root_url, skip_policy)
            executor = CrawlExecutor(
                fetcher=self.fetcher,
                link_extractor=self.link_extractor,
                listener=listener,
            )
            links = executor.crawl(context)
        finally:
            if server is not None:
                server.stop()

        report = CrawlReport.from_links(links)
        logger.info("Checked %s links, passed=%s", len(report.links), report.passed)
        return report


def check(request: CheckRequest, listener: Optional[CrawlListener] = None) -> CrawlReport:
    """Convenience method to run a check with the default wiring."""
    from linkprobe.container import Container

    checker = Container().link_checker()
    return checker.check(request, listener=listener)
