from __future__ import annotations

"""Pillow-backed frame buffer, optionally mirrored to an SSD1306 over I2C.

Without ``hardware=True`` the buffer only lives in memory, which is what the
headless mode and the tests use.
"""

import logging
from typing import Dict, Optional

from PIL import Image, ImageDraw, ImageFont

from .base import Color, Layer


log = logging.getLogger(__name__)


def _ink(color: int) -> int:
    # mode "1" images store lit pixels as 255
    return 255 if color else 0


class PillowDisplay:
    BASE_FONT_PX = 8

    def __init__(self, width: int = 128, height: int = 64, hardware: bool = False):
        self.width = width
        self.height = height
        self.hardware = hardware
        self.image = Image.new("1", (width, height), Color.BLACK)
        self.draw = ImageDraw.Draw(self.image)
        self.device = None
        self.font_path: Optional[str] = None
        self._fonts: Dict[int, ImageFont.ImageFont] = {}
        self.is_on = False

    def init(self, bus: int = 1, address: int = 0x3C) -> None:
        if not self.hardware:
            log.info("Display running in memory only (%dx%d)", self.width, self.height)
            return
        import adafruit_ssd1306
        from adafruit_extended_bus import ExtendedI2C

        i2c = ExtendedI2C(bus)
        self.device = adafruit_ssd1306.SSD1306_I2C(self.width, self.height, i2c, addr=address)
        log.info("SSD1306 %dx%d on i2c-%d at 0x%02x", self.width, self.height, bus, address)

    def set_font(self, font: Optional[str]) -> None:
        self.font_path = font
        self._fonts.clear()

    def _font(self, size: float):
        px = max(6, round(self.BASE_FONT_PX * size))
        if px not in self._fonts:
            if self.font_path:
                self._fonts[px] = ImageFont.truetype(self.font_path, px)
            else:
                self._fonts[px] = ImageFont.load_default(size=px)
        return self._fonts[px]

    def turn_on(self) -> None:
        self.is_on = True
        if self.device is not None:
            self.device.poweron()

    def clear_screen(self) -> None:
        self.draw.rectangle((0, 0, self.width - 1, self.height - 1), fill=Color.BLACK)

    def draw_string(self, x: int, y: int, text: str, size: float = 1, color: int = Color.WHITE, layer: int = Layer.LAYER0) -> None:
        self.draw.text((x, y), text, font=self._font(size), fill=_ink(color))

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int = Color.WHITE, layer: int = Layer.LAYER0) -> None:
        if w <= 0 or h <= 0:
            return
        self.draw.rectangle((x, y, x + w - 1, y + h - 1), fill=_ink(color))

    def refresh(self) -> None:
        if self.device is None:
            log.debug("[Mock] Frame refreshed")
            return
        self.device.image(self.image)
        self.device.show()
