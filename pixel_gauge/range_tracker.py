from __future__ import annotations

"""Adaptive display range that only ever widens."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Range:
    low: float
    high: float

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"range low {self.low} is above high {self.high}")

    def clamp(self, x: Optional[float]) -> float:
        """Pull ``x`` inside the range; ``None`` maps to the low bound."""
        if x is None:
            return self.low
        return max(self.low, min(self.high, x))

    def as_tuple(self) -> tuple[float, float]:
        return (self.low, self.high)


def observe(rng: Range, sample: Optional[float]) -> Range:
    """Return ``rng`` widened to include ``sample``. Never narrows."""
    if sample is None:
        return rng
    low, high = rng.low, rng.high
    if sample < low:
        low = sample
    if sample > high:
        high = sample
    if (low, high) == (rng.low, rng.high):
        return rng
    return Range(low, high)
