from __future__ import annotations

"""Fixed-interval loop driving sample -> range -> history -> render.

All mutable gauge state lives in ``GaugeState`` owned by the scheduler and is
only touched from the thread calling ``tick``. Ticks run back to back and never
overlap; a slow fetch delays the next tick instead.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from .aggregator import Aggregator, Reading
from .callbacks import CallbackDispatcher
from .history import History
from .range_tracker import Range, observe
from .renderer import Renderer
from .sampler import Sampler
from .utils import format_sample


log = logging.getLogger(__name__)


class SchedulerState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class GaugeState:
    range: Range
    history: History
    last_reading: Optional[Reading] = None


class Scheduler:
    def __init__(
        self,
        name: str,
        sampler: Sampler,
        aggregator: Aggregator,
        renderer: Renderer,
        interval_s: float = 60,
        min_max: Tuple[float, float] = (0.0, 10.0),
        dispatcher: Optional[CallbackDispatcher] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.name = name
        self.sampler = sampler
        self.aggregator = aggregator
        self.renderer = renderer
        self.interval_s = interval_s
        self.dispatcher = dispatcher
        self.clock = clock
        self.sleep = sleep
        self.state = SchedulerState.IDLE
        self.gauge = GaugeState(range=Range(*min_max), history=aggregator.new_history())

    def start(self) -> None:
        """Draw the placeholder frame and enter the running state."""
        g = self.gauge
        try:
            self.renderer.render(self.name, self.aggregator.compute(g.history, None), g.range)
        except Exception:
            log.exception("Initial render failed")
        self.state = SchedulerState.RUNNING
        log.info("%s: %s mode every %ss, range (%s-%s)", self.name, self.aggregator.mode, self.interval_s, g.range.low, g.range.high)

    def tick(self) -> Optional[Reading]:
        sample = self.sampler.sample()
        g = self.gauge
        if sample is None:
            log.warning("%s: no sample this tick, state unchanged", self.name)
            return None

        g.range = observe(g.range, sample)
        g.history.push(sample)
        reading = self.aggregator.compute(g.history, sample)
        g.last_reading = reading

        log.info(
            "%s [%s] avg: %.1f (%s-%s)",
            self.name,
            ", ".join(format_sample(v) for v in g.history),
            g.history.mean(),
            format_sample(g.range.low),
            format_sample(g.range.high),
        )

        try:
            self.renderer.render(self.name, reading, g.range)
        except Exception:
            log.exception("%s: render failed", self.name)

        if self.dispatcher is not None:
            self.dispatcher.dispatch(sample)
        return reading

    def _safe_tick(self) -> None:
        try:
            self.tick()
        except Exception:
            log.exception("%s: tick failed", self.name)

    def run(self, iterations: Optional[int] = None) -> None:
        """Tick every ``interval_s`` seconds; the first tick waits one interval.

        ``iterations`` bounds the run for headless use, otherwise it loops
        until the process is interrupted.
        """
        if self.state is SchedulerState.STOPPED:
            log.warning("%s: already stopped, not running again", self.name)
            return
        if self.state is SchedulerState.IDLE:
            self.start()
        done = 0
        next_at = self.clock() + self.interval_s
        try:
            while iterations is None or done < iterations:
                delay = next_at - self.clock()
                if delay > 0:
                    self.sleep(delay)
                started = self.clock()
                self._safe_tick()
                done += 1
                elapsed = self.clock() - started
                if elapsed > self.interval_s:
                    log.warning("%s: tick took %.1fs, longer than the %ss interval", self.name, elapsed, self.interval_s)
                next_at = started + self.interval_s
        except KeyboardInterrupt:
            log.info("Interrupted, stopping")
        finally:
            self.state = SchedulerState.STOPPED
            if self.dispatcher is not None:
                self.dispatcher.shutdown(wait=False)
