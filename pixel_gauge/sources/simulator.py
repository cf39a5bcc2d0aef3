from __future__ import annotations

import random
from typing import Any, Dict

from .base import Auth


class SimulatedFetcher:
    """Bounded random walk standing in for a real endpoint (``sim://`` URLs)."""

    def __init__(self, seed: int = 7, lo: float = 0.0, hi: float = 120.0):
        self.rng = random.Random(seed)
        self.lo = lo
        self.hi = hi
        self.state = lo + (hi - lo) / 12

    def fetch(self, url: str, auth: Auth = None) -> Dict[str, Any]:
        delta = self.rng.uniform(-5.0, 5.0)
        self.state = max(self.lo, min(self.hi, self.state + delta))
        return {"value": round(self.state, 2), "source": url}
