from __future__ import annotations

"""Turns readings into draw calls on the display.

Two layouts share a 128x64-style screen:

* value: centred label on top, big centred number, thin level bar at the
  bottom. The number is clamped into the current range.
* chart: ``LABEL: latest`` header, then one bar per history slot scaled into
  the area under the header. The headline is shown as sampled.
"""

import logging
from typing import Optional, Sequence

from .aggregator import ChartReading, Reading, ValueReading
from .display.base import Color, Display, Layer
from .geometry import affine
from .range_tracker import Range
from .utils import format_sample


log = logging.getLogger(__name__)

TITLE_SIZE = 1.5
TITLE_GLYPH_W = 5
VALUE_SIZE = 5
VALUE_GLYPH_W = 20
VALUE_Y = 17
LEVEL_BAR_PX = 2
HEADER_SIZE = 1
HEADER_PX = 15


def center_x(width: int, text: str, glyph_w: float) -> int:
    return max(0, int(width / 2 - (len(text) / 2) * glyph_w))


class Renderer:
    def __init__(self, display: Optional[Display], width: int = 128, height: int = 64):
        self.display = display
        self.width = width
        self.height = height

    def render(self, label: str, reading: Reading, rng: Range) -> None:
        if isinstance(reading, ChartReading):
            self.render_chart(label, reading.latest, reading.series, rng)
        elif isinstance(reading, ValueReading):
            self.render_value(label, reading.value, rng)
        else:
            raise TypeError(f"unsupported reading {type(reading).__name__}")

    def render_value(self, label: str, value: Optional[float], rng: Range) -> None:
        d = self.display
        if d is None:
            return
        shown = rng.clamp(value)
        text = f"{shown:.1f}"
        bar_w = max(1, int(affine(shown, rng.as_tuple(), (0, self.width))))
        title = label.upper()

        d.clear_screen()
        d.draw_string(center_x(self.width, title, TITLE_GLYPH_W), 0, title, TITLE_SIZE, Color.WHITE, Layer.LAYER0)
        d.draw_string(center_x(self.width, text, VALUE_GLYPH_W), VALUE_Y, text, VALUE_SIZE, Color.WHITE, Layer.LAYER0)
        d.fill_rect(0, self.height - LEVEL_BAR_PX, bar_w, LEVEL_BAR_PX, Color.WHITE, Layer.LAYER0)
        d.refresh()

    def render_chart(self, label: str, latest: Optional[float], series: Sequence[float], rng: Range) -> None:
        d = self.display
        if d is None:
            return
        chart_h = self.height - HEADER_PX
        d.clear_screen()
        d.draw_string(0, 0, f"{label.upper()}: {format_sample(latest)}", HEADER_SIZE, Color.WHITE, Layer.LAYER0)
        # only as many slots as there are pixel columns, newest kept
        series = list(series)[-self.width:]
        if series:
            col_w = max(1, self.width // len(series))
            bar_w = max(1, col_w - 1)
            for i, v in enumerate(series):
                x = i * col_w
                h = int(affine(v, rng.as_tuple(), (0, chart_h - 1)))
                if h > 0:
                    d.fill_rect(x, self.height - h, bar_w, h, Color.WHITE, Layer.LAYER0)
                # baseline keeps empty slots visible
                d.fill_rect(x, self.height - 1, bar_w, 1, Color.WHITE, Layer.LAYER0)
        d.refresh()
