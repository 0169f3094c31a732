"""
Link checker that verifies every hyperlink reachable from a URL or a local
directory, optionally following same-root links recursively.
"""
from linkprobe.domain import CheckRequest, CrawlReport, LinkResult, LinkState
from linkprobe.services.checker import LinkChecker, check

__version__ = "0.1.0"
__all__ = ["check", "LinkChecker", "CheckRequest", "CrawlReport", "LinkResult", "LinkState"]
