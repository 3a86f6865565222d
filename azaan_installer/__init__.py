"""Mini Azaan installer - provisions a Raspberry Pi with the azaan service."""

__version__ = "1.0.0"
