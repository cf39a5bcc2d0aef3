from __future__ import annotations

"""Display value computation, one variant per display mode."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .history import History


@dataclass
class ValueReading:
    value: Optional[float]
    latest: Optional[float] = None


@dataclass
class ChartReading:
    latest: Optional[float]
    series: List[float] = field(default_factory=list)


Reading = Union[ValueReading, ChartReading]


class AveragingAggregator:
    """Smooths noisy gauges: shows the mean of the last N samples."""

    mode = "average"

    def __init__(self, samples_to_average: int = 1):
        self.capacity = samples_to_average

    def new_history(self) -> History:
        return History(self.capacity)

    def compute(self, history: History, latest: Optional[float]) -> ValueReading:
        value = history.mean() if len(history) else None
        return ValueReading(value=value, latest=latest)


class ChartAggregator:
    """Shows the last N samples as bars with the latest raw value as headline."""

    mode = "chart"

    def __init__(self, samples_to_show: int = 10):
        self.capacity = samples_to_show

    def new_history(self) -> History:
        # zero-filled so the chart always has exactly N bars
        return History(self.capacity, prefill=0.0)

    def compute(self, history: History, latest: Optional[float]) -> ChartReading:
        return ChartReading(latest=latest, series=history.to_list())


Aggregator = Union[AveragingAggregator, ChartAggregator]


def make_aggregator(samples_to_average: Optional[int] = None, samples_to_show: Optional[int] = None) -> Aggregator:
    if samples_to_show:
        return ChartAggregator(samples_to_show)
    return AveragingAggregator(samples_to_average or 1)
