import logging
from typing import Callable

import requests

from linkprobe.domain.http_response import HttpResponse
from linkprobe.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class HttpService:
    """
    HTTP client wrapper used as the crawl transport.

    Requires http_client callable (`requests.request` signature) for dependency
    injection. This enables easy testing without patching and allows swapping
    HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 10):
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout!r}")
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def request(self, method: str, url: str, read_body: bool = True) -> HttpResponse:
        """Issue `method` against `url` and return status code, body text and Content-Type.

        Non-2xx statuses are returned as-is. When `read_body` is False the
        response is streamed and closed without downloading the body.
        """
        headers = {"User-Agent": self.user_agent}
        logger.debug("%s %s", method, url)
        try:
            resp = self.http_client(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=True,
                stream=not read_body,
            )
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        try:
            # let non-requests exceptions bubble up
            ct = resp.headers.get('Content-Type')
            text = resp.text if read_body else ""
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e
        finally:
            if not read_body:
                resp.close()

        return HttpResponse(resp.status_code, text, ct)

    def head(self, url: str) -> HttpResponse:
        return self.request("HEAD", url, read_body=False)

    def get(self, url: str, read_body: bool = True) -> HttpResponse:
        return self.request("GET", url, read_body=read_body)
