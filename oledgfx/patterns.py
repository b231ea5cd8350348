"""Display test routines: colour constants, shape sweeps and colour-bar patterns."""

from __future__ import annotations

from enum import IntEnum

from .gfx import GFX
from .ssd1351 import HEIGHT, SSD1351, WIDTH


class Color(IntEnum):
    """Common RGB565 colours."""

    BLACK = 0x0000
    BLUE = 0x001F
    GREEN = 0x07E0
    CYAN = 0x07FF
    RED = 0xF800
    MAGENTA = 0xF81F
    YELLOW = 0xFFE0
    WHITE = 0xFFFF


_BANDS = (
    Color.RED,
    Color.YELLOW,
    Color.GREEN,
    Color.CYAN,
    Color.BLUE,
    Color.MAGENTA,
    Color.BLACK,
    Color.WHITE,
)
_BAND_SIZE = 16


def _check_radius(radius: int) -> None:
    if not 1 <= radius <= 0xFF:
        raise ValueError(f"radius must be between 1 and 255: {radius}")


def fast_lines(gfx: GFX, color1: int, color2: int) -> None:
    """Clear the screen, then draw a grid of horizontal and vertical lines every 8 pixels."""
    gfx.fill_screen(Color.BLACK)
    for y in range(0, gfx.height() - 1, 8):
        gfx.draw_fast_hline(0, y, gfx.width() - 1, color1)
    for x in range(0, gfx.width() - 1, 8):
        gfx.draw_fast_vline(x, 0, gfx.height() - 1, color2)


def draw_rects(gfx: GFX, color: int) -> None:
    """Clear the screen and draw concentric square outlines growing by 6 pixels."""
    gfx.fill_screen(Color.BLACK)
    cx = (gfx.width() - 1) // 2
    cy = (gfx.height() - 1) // 2
    for size in range(0, gfx.height() - 1, 6):
        gfx.draw_rect(cx - size // 2, cy - size // 2, size, size, color)


def fill_rects(gfx: GFX, color1: int, color2: int) -> None:
    """Clear the screen and draw shrinking filled, outlined squares about the centre."""
    gfx.fill_screen(Color.BLACK)
    cx = (gfx.width() - 1) // 2
    cy = (gfx.height() - 1) // 2
    for size in range(gfx.height() - 1, 6, -6):
        left = cx - size // 2
        top = cy - size // 2
        gfx.fill_rect(left, top, size, size, color1)
        gfx.draw_rect(left, top, size, size, color2)


def fill_circles(gfx: GFX, radius: int, color: int) -> None:
    """Tile the screen with filled circles of the given radius."""
    _check_radius(radius)
    step = radius * 2
    for x in range(radius, gfx.width() - 1, step):
        for y in range(radius, gfx.height() - 1, step):
            gfx.fill_circle(x, y, radius, color)


def draw_circles(gfx: GFX, radius: int, color: int) -> None:
    """Tile the screen, edges included, with circle outlines of the given radius."""
    _check_radius(radius)
    step = radius * 2
    for x in range(0, gfx.width() - 1 + radius, step):
        for y in range(0, gfx.height() - 1 + radius, step):
            gfx.draw_circle(x, y, radius, color)


def triangles(gfx: GFX) -> None:
    """Clear the screen and draw sixteen nested triangles of shifting colour."""
    gfx.fill_screen(Color.BLACK)
    color = int(Color.RED)
    apex_x = gfx.width() // 2
    bottom = gfx.height() - 1
    top = 0
    right = gfx.width() - 1
    for _ in range(16):
        gfx.draw_triangle(apex_x, top, top, bottom, right, bottom, color)
        bottom -= 4
        top += 4
        right -= 4
        color += 100


def round_rects(gfx: GFX) -> None:
    """Clear the screen and draw twenty-five nested rounded rectangles."""
    gfx.fill_screen(Color.BLACK)
    color = 100
    x = y = 0
    w = gfx.width()
    h = gfx.height()
    for _ in range(25):
        gfx.draw_round_rect(x, y, w, h, 5, color)
        x += 2
        y += 3
        w -= 4
        h -= 6
        color += 1100


def lines(gfx: GFX, color: int) -> None:
    """Fan lines out from each corner of the screen in turn."""
    right = gfx.width() - 1
    bottom = gfx.height() - 1
    for cx, cy in ((0, 0), (right, 0), (0, bottom), (right, bottom)):
        gfx.fill_screen(Color.BLACK)
        far_x = 0 if cx else right
        far_y = 0 if cy else bottom
        for x in range(0, right, 6):
            gfx.draw_line(cx, cy, x, far_y, color)
        for y in range(0, bottom, 6):
            gfx.draw_line(cx, cy, far_x, y, color)


def _band_pattern(driver: SSD1351, by_row: bool) -> None:
    driver.go_to(0, 0)
    for row in range(HEIGHT):
        for col in range(WIDTH):
            color = _BANDS[(row if by_row else col) // _BAND_SIZE]
            driver.write_data(color >> 8)
            driver.write_data(color)


def lcd_test_pattern(driver: SSD1351) -> None:
    """Fill the panel with eight horizontal colour bars."""
    _band_pattern(driver, by_row=True)


def lcd_test_pattern2(driver: SSD1351) -> None:
    """Fill the panel with eight vertical colour bars."""
    _band_pattern(driver, by_row=False)