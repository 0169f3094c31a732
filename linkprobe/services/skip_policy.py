import logging
import re
from typing import Iterable

from linkprobe.exceptions import InvalidSkipPatternError

logger = logging.getLogger(__name__)

MAILTO_PATTERN = "^mailto:"


class SkipPolicy:
    """Decides which URLs are reported as SKIPPED instead of being fetched.

    Patterns are matched with `re.search`, so a pattern can match anywhere in
    the URL (e.g. a bare domain fragment). `^mailto:` is always included.
    """

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns = tuple(patterns or ()) + (MAILTO_PATTERN,)
        self._compiled = [self._compile(p) for p in self.patterns]

    @staticmethod
    def _compile(pattern: str) -> "re.Pattern[str]":
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidSkipPatternError(pattern, e) from e

    def should_skip(self, url: str) -> bool:
        for regex in self._compiled:
            if regex.search(url):
                logger.debug("Skipping (pattern %s) %s", regex.pattern, url)
                return True
        return False
