from .base import FetchError, Fetcher
from .remote import HttpFetcher
from .simulator import SimulatedFetcher


def make_fetcher(url: str, timeout_s: float = 10.0) -> Fetcher:
    """Pick a fetcher by URL scheme: ``sim://`` is simulated, anything else HTTP."""
    if url.startswith("sim://"):
        return SimulatedFetcher()
    return HttpFetcher(timeout_s=timeout_s)


__all__ = ["FetchError", "Fetcher", "HttpFetcher", "SimulatedFetcher", "make_fetcher"]
