from pixel_gauge.aggregator import AveragingAggregator, ChartAggregator, ChartReading, ValueReading
from pixel_gauge.range_tracker import Range
from pixel_gauge.renderer import Renderer
from pixel_gauge.sampler import Sampler
from pixel_gauge.scheduler import Scheduler, SchedulerState
from pixel_gauge.sources.filters import resolve_filter

from fakes import RecordingDisplay, ScriptedFetcher


FAIL = ScriptedFetcher.FAIL


def make(values, aggregator, min_max=(0, 10), display=None, **kw):
    sampler = Sampler(ScriptedFetcher(values), "sim://t", resolve_filter("value"))
    return Scheduler("wind", sampler, aggregator, Renderer(display), min_max=min_max, **kw)


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, s):
        self.sleeps.append(s)
        self.now += s


def test_range_widens_over_ticks():
    s = make([3, 15, -2, 8], AveragingAggregator(1))
    for _ in range(4):
        s.tick()
    assert s.gauge.range == Range(-2, 15)


def test_chart_history_evicts():
    s = make([5, 6, 7, 8], ChartAggregator(3))
    assert s.gauge.history.to_list() == [0, 0, 0]
    for _ in range(4):
        reading = s.tick()
    assert s.gauge.history.to_list() == [6, 7, 8]
    assert isinstance(reading, ChartReading)
    assert reading.latest == 8 and reading.series == [6, 7, 8]


def test_average_single_sample():
    s = make([4], AveragingAggregator(1))
    reading = s.tick()
    assert isinstance(reading, ValueReading)
    assert f"{reading.value:.1f}" == "4.0"


def test_fetch_failure_leaves_state_untouched():
    s = make([3, FAIL, 12, 9], AveragingAggregator(2))
    s.tick()
    before = (s.gauge.range, s.gauge.history.to_list())
    assert s.tick() is None
    assert (s.gauge.range, s.gauge.history.to_list()) == before
    s.tick()
    s.tick()
    assert s.gauge.range == Range(0, 12)
    assert s.gauge.history.to_list() == [12, 9]


def test_render_failure_does_not_stop_tick():
    class Broken(RecordingDisplay):
        def refresh(self):
            raise RuntimeError("i2c gone")

    s = make([1, 2], AveragingAggregator(2), display=Broken())
    assert s.tick() is not None
    assert s.tick().value == 1.5


def test_callback_dispatched_with_raw_sample():
    seen = []

    class Dispatcher:
        def dispatch(self, sample):
            seen.append(sample)

        def shutdown(self, wait=False):
            seen.append("shutdown")

    s = make([3, FAIL, 4], AveragingAggregator(1), dispatcher=Dispatcher())
    clock = FakeClock()
    s.clock, s.sleep = clock, clock.sleep
    s.run(iterations=3)
    assert seen == [3.0, 4.0, "shutdown"]


def test_run_lifecycle_and_pacing():
    d = RecordingDisplay()
    s = make([1, 2, 3], AveragingAggregator(3), display=d, interval_s=10)
    clock = FakeClock()
    s.clock, s.sleep = clock, clock.sleep
    assert s.state is SchedulerState.IDLE
    s.run(iterations=3)
    assert s.state is SchedulerState.STOPPED
    assert clock.sleeps == [10, 10, 10]
    # placeholder frame plus one per tick
    assert len(d.named("refresh")) == 4
    assert d.named("draw_string")[1][3] == "0.0"
    assert s.gauge.last_reading.value == 2.0


def test_overrunning_tick_starts_next_immediately():
    clock = FakeClock()

    class SlowFetcher(ScriptedFetcher):
        def fetch(self, url, auth=None):
            clock.now += 15
            return super().fetch(url, auth)

    sampler = Sampler(SlowFetcher([1, 2]), "sim://t", resolve_filter("value"))
    s = Scheduler("slow", sampler, AveragingAggregator(1), Renderer(None), interval_s=10, clock=clock, sleep=clock.sleep)
    s.run(iterations=2)
    assert clock.sleeps == [10]
    assert s.gauge.history.to_list() == [2]


def test_ticks_during_hung_callback_stay_bounded():
    import threading

    from pixel_gauge.callbacks import CallbackDispatcher

    gate = threading.Event()
    calls = []

    def hung(sample):
        calls.append(sample)
        gate.wait(5)

    dispatcher = CallbackDispatcher(hung)
    s = make(list(range(50)), AveragingAggregator(1), dispatcher=dispatcher)
    for _ in range(50):
        s.tick()
    gate.set()
    dispatcher.shutdown(wait=True)
    assert calls == [0.0]


def test_run_after_stop_does_nothing():
    s = make([1, 2], AveragingAggregator(1))
    clock = FakeClock()
    s.clock, s.sleep = clock, clock.sleep
    s.run(iterations=1)
    assert s.state is SchedulerState.STOPPED
    s.run(iterations=1)
    assert s.state is SchedulerState.STOPPED
    assert s.sampler.fetcher.calls == 1
