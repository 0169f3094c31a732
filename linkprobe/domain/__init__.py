"""Domain objects for linkprobe - explicit re-exports to satisfy linters."""
from .link_result import LinkResult as LinkResult
from .link_result import LinkState as LinkState
from .crawl_report import CrawlReport as CrawlReport
from .check_request import CheckRequest as CheckRequest
from .config import CheckConfig as CheckConfig

__all__ = ["LinkResult", "LinkState", "CrawlReport", "CheckRequest", "CheckConfig"]
