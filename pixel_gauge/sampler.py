from __future__ import annotations

import logging
from typing import Optional

from .sources.base import Auth, FetchError, Fetcher
from .sources.filters import Filter
from .utils import safe_float


log = logging.getLogger(__name__)


class Sampler:
    """Fetch one payload and extract one numeric sample from it."""

    def __init__(self, fetcher: Fetcher, url: str, filter_fn: Filter, auth: Auth = None):
        self.fetcher = fetcher
        self.url = url
        self.filter_fn = filter_fn
        self.auth = auth

    def sample(self) -> Optional[float]:
        """Return the current value, or None when it could not be obtained."""
        try:
            payload = self.fetcher.fetch(self.url, self.auth)
        except FetchError as e:
            log.warning("Fetch failed: %s", e)
            return None
        try:
            raw = self.filter_fn(payload)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            log.warning("Filter could not extract a value: %r", e)
            return None
        val = safe_float(raw)
        if val is None:
            log.warning("Filter returned a non-numeric value: %r", raw)
        return val
