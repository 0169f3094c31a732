"""Protocol (interface) definitions for services."""

from typing import Protocol

from linkprobe.domain.http_response import HttpResponse
from linkprobe.domain.link_result import LinkResult


class Transport(Protocol):
    """Issue HTTP requests.

    Must not raise on non-2xx statuses; raises `HttpFetchError` on
    network-level failures.
    """
    def request(self, method: str, url: str, read_body: bool = True) -> HttpResponse: ...

    def head(self, url: str) -> HttpResponse: ...

    def get(self, url: str, read_body: bool = True) -> HttpResponse: ...


class LinkExtractor(Protocol):
    def extract(self, html: str, base_url: str) -> list[str]:
        """Return absolute URLs referenced by `html`, resolved against `base_url`."""
        ...


class CrawlListener(Protocol):
    """Progress callbacks fired by the crawl engine, in result order."""

    def on_page_start(self, url: str) -> None:
        """A page's children are about to be checked."""
        ...

    def on_link(self, result: LinkResult) -> None:
        """A URL's result is final (OK, BROKEN or SKIPPED)."""
        ...


class NullListener:
    def on_page_start(self, url: str) -> None:
        pass

    def on_link(self, result: LinkResult) -> None:
        pass
