from .base import Color, Display, Layer
from .pillow import PillowDisplay

__all__ = ["Color", "Display", "Layer", "PillowDisplay"]
