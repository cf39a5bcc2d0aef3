from typing import Any, Optional, Protocol, Tuple


Auth = Optional[Tuple[str, str]]


class FetchError(Exception):
    """Transport, HTTP or decoding failure while fetching a sample."""


class Fetcher(Protocol):
    def fetch(self, url: str, auth: Auth = None) -> Any:
        """Return the decoded payload for ``url`` or raise FetchError."""
