from pixel_gauge.aggregator import ChartReading, ValueReading
from pixel_gauge.display import Color, PillowDisplay
from pixel_gauge.range_tracker import Range
from pixel_gauge.renderer import Renderer


def test_value_frame_draws_pixels():
    d = PillowDisplay(128, 64)
    d.init(1, 0x3C)
    d.turn_on()
    Renderer(d, 128, 64).render("wind", ValueReading(value=5.0), Range(0, 10))
    assert d.image.getbbox() is not None
    # level bar at half width along the bottom rows
    assert d.image.getpixel((0, 63)) == 255
    assert d.image.getpixel((63, 63)) == 255
    assert d.image.getpixel((70, 63)) == 0


def test_chart_frame_and_clear():
    d = PillowDisplay(128, 64)
    Renderer(d, 128, 64).render("wind", ChartReading(latest=10, series=[0, 10]), Range(0, 10))
    # full-height bar in the second column, only a baseline in the first
    assert d.image.getpixel((70, 20)) == 255
    assert d.image.getpixel((10, 60)) == 0
    assert d.image.getpixel((10, 63)) == 255
    d.clear_screen()
    assert d.image.getbbox() is None


def test_fill_rect_ignores_empty():
    d = PillowDisplay(16, 24)
    d.fill_rect(0, 0, 0, 5, Color.WHITE)
    assert d.image.getbbox() is None
    d.fill_rect(2, 3, 2, 2, Color.WHITE)
    assert d.image.getbbox() == (2, 3, 4, 5)


def test_refresh_without_device():
    d = PillowDisplay()
    d.refresh()
    assert d.device is None
