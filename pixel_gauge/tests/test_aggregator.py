from pixel_gauge.aggregator import AveragingAggregator, ChartAggregator, ChartReading, ValueReading, make_aggregator
from pixel_gauge.utils import format_sample, round_half_away, safe_float


def test_mode_selection():
    assert isinstance(make_aggregator(samples_to_show=10), ChartAggregator)
    assert isinstance(make_aggregator(samples_to_average=3), AveragingAggregator)
    avg = make_aggregator()
    assert isinstance(avg, AveragingAggregator) and avg.capacity == 1


def test_averaging_reading():
    agg = AveragingAggregator(3)
    h = agg.new_history()
    assert agg.compute(h, None) == ValueReading(value=None, latest=None)
    for v in [2, 3, 5]:
        h.push(v)
    assert agg.compute(h, 5) == ValueReading(value=3.3, latest=5)


def test_chart_reading():
    agg = ChartAggregator(4)
    h = agg.new_history()
    h.push(9)
    assert agg.compute(h, 9) == ChartReading(latest=9, series=[0, 0, 0, 9])


def test_helpers():
    assert round_half_away(2.675, 2) == 2.68
    assert round_half_away(-0.25, 1) == -0.3
    assert safe_float("3") == 3.0
    assert safe_float(True) is None
    assert safe_float(float("nan")) is None
    assert format_sample(5.0) == "5"
    assert format_sample(5.25) == "5.25"
    assert format_sample(None) == "--"


def test_format_sample_keeps_all_digits():
    assert format_sample(1234567.0) == "1234567"
    assert format_sample(0.1) == "0.1"
    assert format_sample(-2.5) == "-2.5"
    assert format_sample(12345.678) == "12345.678"
