from typing import NamedTuple, Optional

from linkprobe.domain.link_result import LinkResult, LinkState


class FetchResult(NamedTuple):
    """Classified outcome of fetching one URL."""
    url: str
    state: LinkState
    status: Optional[int] = None
    body: str = ""
    is_html: bool = False

    @property
    def link_result(self) -> LinkResult:
        return LinkResult(url=self.url, status=self.status, state=self.state)
