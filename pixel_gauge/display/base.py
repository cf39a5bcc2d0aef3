from typing import Optional, Protocol


class Color:
    BLACK = 0
    WHITE = 1


class Layer:
    LAYER0 = 0
    LAYER1 = 1


class Display(Protocol):
    """Buffered monochrome pixel display. Coordinates are integer pixels."""

    def init(self, bus: int, address: int) -> None: ...

    def set_font(self, font: Optional[str]) -> None: ...

    def turn_on(self) -> None: ...

    def clear_screen(self) -> None: ...

    def draw_string(self, x: int, y: int, text: str, size: float, color: int, layer: int) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int, layer: int) -> None: ...

    def refresh(self) -> None:
        """Make everything drawn since the last refresh visible."""
