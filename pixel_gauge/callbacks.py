from __future__ import annotations

"""Per-sample side effects, run off the main loop and only ever logged."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

import requests

from .sources.base import Auth


log = logging.getLogger(__name__)


SampleCallback = Callable[[float], object]


class WebhookCallback:
    """POST each sample as JSON to a URL."""

    def __init__(self, url: str, source: str, auth: Auth = None, timeout_s: float = 10.0):
        self.url = url
        self.source = source
        self.auth = auth
        self.timeout_s = timeout_s

    def __call__(self, sample: float) -> int:
        resp = requests.post(
            self.url,
            json={"source": self.source, "value": sample},
            auth=self.auth,
            timeout=self.timeout_s,
        )
        resp.raise_for_status()
        return resp.status_code


class CallbackDispatcher:
    def __init__(self, callback: SampleCallback, max_workers: int = 1):
        self.callback = callback
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="callback")
        self._pending: Optional[Future] = None

    def dispatch(self, sample: float) -> Optional[Future]:
        """Start the callback and return without waiting for it.

        At most one callback is outstanding; while it runs, new samples are
        skipped so a hung endpoint cannot grow a backlog.
        """
        if self._pending is not None and not self._pending.done():
            log.warning("Callback still running, skipping sample %s", sample)
            return None
        fut = self._pool.submit(self.callback, sample)
        fut.add_done_callback(_log_outcome)
        self._pending = fut
        return fut

    def shutdown(self, wait: bool = False) -> None:
        self._pool.shutdown(wait=wait)


def _log_outcome(fut: Future) -> None:
    if fut.cancelled():
        log.info("Callback cancelled")
        return
    err = fut.exception()
    if err is None:
        log.debug("Callback finished")
        return
    resp: Optional[requests.Response] = getattr(err, "response", None)
    if resp is not None:
        log.warning("Callback error: %s %s", resp.status_code, resp.reason)
    else:
        log.warning("Callback error: %r", err)
