"""Poll a remote value and show it on a small monochrome OLED."""

__version__ = "0.1.0"
