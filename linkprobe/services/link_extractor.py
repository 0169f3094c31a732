import logging
from typing import Callable, Optional
from urllib.parse import urldefrag, urljoin

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# attribute -> tags that may carry a URL in it
LINK_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "background": ("body",),
    "cite": ("blockquote", "del", "ins", "q"),
    "data": ("object",),
    "href": ("a", "area", "embed", "link"),
    "icon": ("command",),
    "longdesc": ("frame", "iframe"),
    "manifest": ("html",),
    "poster": ("video",),
    "pluginspage": ("embed",),
    "pluginspace": ("embed",),
    "src": ("audio", "embed", "frame", "iframe", "img", "input", "script", "source", "track", "video"),
    "srcset": ("img", "source"),
}


def _srcset_urls(value: str) -> list[str]:
    # "a.png 1x, b.png 2x" -> ["a.png", "b.png"]
    urls = []
    for candidate in value.split(","):
        parts = candidate.strip().split()
        if parts:
            urls.append(parts[0])
    return urls


class HtmlLinkExtractor:
    """Extract absolute hyperlink URLs from an HTML document."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def _base_url(self, soup: BeautifulSoup, page_url: str) -> str:
        base = soup.find("base", href=True)
        if base is None or not base["href"].strip():
            return page_url
        return urljoin(page_url, base["href"].strip())

    def _raw_links(self, soup: BeautifulSoup) -> list[str]:
        raw = []
        for element in soup.find_all(True):
            for attr, tags in LINK_ATTRIBUTES.items():
                if element.name not in tags:
                    continue
                value = element.get(attr)
                if not value:
                    continue
                if isinstance(value, list):
                    value = " ".join(value)
                if attr == "srcset":
                    raw.extend(_srcset_urls(value))
                else:
                    raw.append(value.strip())
        return [link for link in raw if link]

    def extract(self, html: str, base_url: str) -> list[str]:
        """Return de-duplicated absolute URLs in document order, fragments removed."""
        if not html:
            return []
        soup = self._soup_factory(html)
        resolve_against = self._base_url(soup, base_url)

        links: dict[str, None] = {}
        for link in self._raw_links(soup):
            try:
                absolute, _ = urldefrag(urljoin(resolve_against, link))
            except ValueError:
                logger.debug("Ignoring unparseable link %r on %s", link, base_url)
                continue
            links.setdefault(absolute, None)
        return list(links)
