from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from a transport request."""
    status_code: int
    text: str
    content_type: Optional[str] = None
