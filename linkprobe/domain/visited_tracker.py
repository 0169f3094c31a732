class VisitedTracker:
    """
    Tracks which URLs have been visited during a single check run.

    Every URL is fetched at most once per run, so the tracker never evicts.
    Insertion order is kept so callers can inspect the visit sequence.
    """

    def __init__(self):
        self._visited: dict[str, None] = {}

    def mark(self, url: str) -> None:
        """Mark a URL as visited."""
        self._visited.setdefault(url, None)

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def urls(self) -> list[str]:
        return list(self._visited)

    def __len__(self) -> int:
        return len(self._visited)
