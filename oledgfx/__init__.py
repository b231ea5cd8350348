"""Graphics primitives, a 5x7 font, an SSD1351 driver with a simulated panel, and demos."""

__version__ = "0.1.0"
__all__ = ["font", "ssd1351", "gfx", "patterns", "accel"]