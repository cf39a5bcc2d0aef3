from __future__ import annotations

import logging
import time
from typing import Any

import requests

from .base import Auth, FetchError


log = logging.getLogger(__name__)


class HttpFetcher:
    def __init__(self, timeout_s: float = 10.0):
        self.timeout_s = timeout_s

    def fetch(self, url: str, auth: Auth = None) -> Any:
        start = time.time()
        try:
            resp = requests.get(url, auth=auth, timeout=self.timeout_s)
            resp.raise_for_status()
            payload = resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(f"HTTP {status} from {_redact(url)}") from e
        except (requests.RequestException, ValueError) as e:
            raise FetchError(f"{type(e).__name__} fetching {_redact(url)}: {e}") from e
        log.debug("Fetched %s in %.0f ms", _redact(url), (time.time() - start) * 1000)
        return payload


def _redact(url: str) -> str:
    # query strings tend to carry API tokens
    return url.split("?", 1)[0]
