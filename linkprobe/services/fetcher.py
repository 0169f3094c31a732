from __future__ import annotations

import logging
from typing import Protocol

from linkprobe.domain.fetch_result import FetchResult
from linkprobe.domain.http_response import HttpResponse
from linkprobe.domain.link_result import LinkState
from linkprobe.exceptions import HttpFetchError
from linkprobe.services.protocols import Transport
from linkprobe.utils.content_type import is_html

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = 405


class Fetcher(Protocol):
    """Fetch a URL and classify the outcome for the crawl engine."""

    def fetch(self, url: str, should_crawl_children: bool) -> FetchResult: ...


class LinkFetcher:
    """HEAD-then-GET link checker over an `HttpService`-like transport.

    A HEAD is enough to learn whether a link is alive; a GET is only issued
    when the body is needed for link extraction, or when the server rejects
    HEAD with 405.
    """

    def __init__(self, http_service: Transport):
        self._http_service = http_service

    def _request(self, url: str, should_crawl_children: bool) -> HttpResponse:
        if should_crawl_children:
            return self._http_service.get(url)
        response = self._http_service.head(url)
        if response.status_code == METHOD_NOT_ALLOWED:
            logger.debug("HEAD not allowed for %s, retrying with GET", url)
            response = self._http_service.get(url, read_body=False)
        return response

    def fetch(self, url: str, should_crawl_children: bool) -> FetchResult:
        try:
            response = self._request(url, should_crawl_children)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return FetchResult(url=url, state=LinkState.BROKEN)
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return FetchResult(url=url, state=LinkState.BROKEN)

        status = int(response.status_code)
        if 200 <= status < 300:
            state = LinkState.OK
            logger.info("Fetched %s -> status %s", url, status)
        else:
            state = LinkState.BROKEN
            logger.warning("Non-success status for %s: %s", url, status)

        return FetchResult(
            url=url,
            state=state,
            status=status,
            body=response.text or "",
            is_html=is_html(response.content_type),
        )
