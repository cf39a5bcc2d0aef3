from __future__ import annotations

"""Fixed-capacity sample history with a rounded running mean."""

from collections import deque
from typing import Deque, Iterator, Optional

import numpy as np

from .utils import round_half_away


class History:
    def __init__(self, capacity: int, prefill: Optional[float] = None):
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self.capacity = capacity
        self.data: Deque[float] = deque(maxlen=capacity)
        if prefill is not None:
            self.data.extend([float(prefill)] * capacity)

    def push(self, sample: float) -> None:
        # deque(maxlen) drops exactly one entry from the left when full
        self.data.append(float(sample))

    def to_list(self) -> list[float]:
        return list(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def mean(self) -> float:
        """Mean of the held samples rounded to one decimal; 0 when empty.

        Divides by the current count, so a half-filled buffer still yields a
        valid average.
        """
        if not self.data:
            return 0.0
        if len(self.data) == 1:
            return round_half_away(self.data[0], 1)
        return round_half_away(float(np.sum(self.to_list())) / len(self.data), 1)
