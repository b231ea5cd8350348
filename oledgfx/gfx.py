"""Graphics primitives (lines, circles, triangles, text) on an SSD1351 panel."""

from __future__ import annotations

from .font import glyph
from .ssd1351 import HEIGHT, WIDTH, SSD1351, Transport

_GLYPH_COLUMNS = 6
_GLYPH_ROWS = 8


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _circle_steps(r: int):
    """Yield the (x, y) octant offsets of a midpoint circle of radius r."""
    f = 1 - r
    ddf_x = 1
    ddf_y = -2 * r
    x = 0
    y = r
    while x < y:
        if f >= 0:
            y -= 1
            ddf_y += 2
            f += ddf_y
        x += 1
        ddf_x += 2
        f += ddf_x
        yield x, y


class GFX(SSD1351):
    """Drawing surface with shape and text primitives and a text cursor."""

    def __init__(self, panel: Transport | None = None) -> None:
        super().__init__(panel)
        self.cursor_x = 0
        self.cursor_y = 0
        self.text_size = 1
        self.text_color = 0xFFFF
        self.text_bg_color = 0xFFFF
        self.wrap = True

    def draw_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        """Draw a circle outline centred on (x0, y0)."""
        self.draw_pixel(x0, y0 + r, color)
        self.draw_pixel(x0, y0 - r, color)
        self.draw_pixel(x0 + r, y0, color)
        self.draw_pixel(x0 - r, y0, color)
        for x, y in _circle_steps(r):
            self.draw_pixel(x0 + x, y0 + y, color)
            self.draw_pixel(x0 - x, y0 + y, color)
            self.draw_pixel(x0 + x, y0 - y, color)
            self.draw_pixel(x0 - x, y0 - y, color)
            self.draw_pixel(x0 + y, y0 + x, color)
            self.draw_pixel(x0 - y, y0 + x, color)
            self.draw_pixel(x0 + y, y0 - x, color)
            self.draw_pixel(x0 - y, y0 - x, color)

    def draw_circle_helper(self, x0: int, y0: int, r: int, cornername: int, color: int) -> None:
        """Draw the quarter-circle arcs selected by the bits of cornername."""
        for x, y in _circle_steps(r):
            if cornername & 0x4:
                self.draw_pixel(x0 + x, y0 + y, color)
                self.draw_pixel(x0 + y, y0 + x, color)
            if cornername & 0x2:
                self.draw_pixel(x0 + x, y0 - y, color)
                self.draw_pixel(x0 + y, y0 - x, color)
            if cornername & 0x8:
                self.draw_pixel(x0 - y, y0 + x, color)
                self.draw_pixel(x0 - x, y0 + y, color)
            if cornername & 0x1:
                self.draw_pixel(x0 - y, y0 - x, color)
                self.draw_pixel(x0 - x, y0 - y, color)

    def fill_circle(self, x0: int, y0: int, r: int, color: int) -> None:
        """Draw a filled circle centred on (x0, y0)."""
        self.draw_fast_vline(x0, y0 - r, 2 * r + 1, color)
        self.fill_circle_helper(x0, y0, r, 3, 0, color)

    def fill_circle_helper(
        self, x0: int, y0: int, r: int, cornername: int, delta: int, color: int
    ) -> None:
        """Fill the right (bit 0) and/or left (bit 1) half of a circle, stretched by delta."""
        for x, y in _circle_steps(r):
            if cornername & 0x1:
                self.draw_fast_vline(x0 + x, y0 - y, 2 * y + 1 + delta, color)
                self.draw_fast_vline(x0 + y, y0 - x, 2 * x + 1 + delta, color)
            if cornername & 0x2:
                self.draw_fast_vline(x0 - x, y0 - y, 2 * y + 1 + delta, color)
                self.draw_fast_vline(x0 - y, y0 - x, 2 * x + 1 + delta, color)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: int) -> None:
        """Draw a straight line with Bresenham's algorithm."""
        steep = abs(y1 - y0) > abs(x1 - x0)
        if steep:
            x0, y0 = y0, x0
            x1, y1 = y1, x1
        if x0 > x1:
            x0, x1 = x1, x0
            y0, y1 = y1, y0
        dx = x1 - x0
        dy = abs(y1 - y0)
        err = dx // 2
        ystep = 1 if y0 < y1 else -1
        y = y0
        for x in range(x0, x1 + 1):
            if steep:
                self.draw_pixel(y, x, color)
            else:
                self.draw_pixel(x, y, color)
            err -= dy
            if err < 0:
                y += ystep
                err += dx

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Draw a rectangle outline."""
        self.draw_fast_hline(x, y, w, color)
        self.draw_fast_hline(x, y + h - 1, w, color)
        self.draw_fast_vline(x, y, h, color)
        self.draw_fast_vline(x + w - 1, y, h, color)

    def draw_round_rect(self, x: int, y: int, w: int, h: int, r: int, color: int) -> None:
        """Draw a rectangle outline with corners of radius r."""
        self.draw_fast_hline(x + r, y, w - 2 * r, color)
        self.draw_fast_hline(x + r, y + h - 1, w - 2 * r, color)
        self.draw_fast_vline(x, y + r, h - 2 * r, color)
        self.draw_fast_vline(x + w - 1, y + r, h - 2 * r, color)
        self.draw_circle_helper(x + r, y + r, r, 1, color)
        self.draw_circle_helper(x + w - r - 1, y + r, r, 2, color)
        self.draw_circle_helper(x + w - r - 1, y + h - r - 1, r, 4, color)
        self.draw_circle_helper(x + r, y + h - r - 1, r, 8, color)

    def fill_round_rect(self, x: int, y: int, w: int, h: int, r: int, color: int) -> None:
        """Draw a filled rectangle with corners of radius r."""
        self.fill_rect(x + r, y, w - 2 * r, h, color)
        self.fill_circle_helper(x + w - r - 1, y + r, r, 1, h - 2 * r - 1, color)
        self.fill_circle_helper(x + r, y + r, r, 2, h - 2 * r - 1, color)

    def draw_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Draw a triangle outline."""
        self.draw_line(x0, y0, x1, y1, color)
        self.draw_line(x1, y1, x2, y2, color)
        self.draw_line(x2, y2, x0, y0, color)

    def fill_triangle(
        self, x0: int, y0: int, x1: int, y1: int, x2: int, y2: int, color: int
    ) -> None:
        """Draw a filled triangle by horizontal scanlines."""
        dx01, dy01 = x1 - x0, y1 - y0
        dx02, dy02 = x2 - x0, y2 - y0
        dx12, dy12 = x2 - x1, y2 - y1
        sa = sb = 0

        # The deltas are taken before sorting, as the scanline sums expect.
        if y0 > y1:
            y0, y1 = y1, y0
            x0, x1 = x1, x0
        if y1 > y2:
            y2, y1 = y1, y2
            x2, x1 = x1, x2
        if y0 > y1:
            y0, y1 = y1, y0
            x0, x1 = x1, x0

        if y0 == y2:
            a = b = x0
            if x1 < a:
                a = x1
            elif x1 > b:
                b = x1
            if x2 < a:
                a = x2
            elif x2 > b:
                b = x2
            self.draw_fast_hline(a, y0, b - a + 1, color)
            return

        last = y1 if y1 == y2 else y1 - 1
        for y in range(y0, last + 1):
            a = x0 + _cdiv(sa, dy01)
            b = x0 + _cdiv(sb, dy02)
            sa += dx01
            sb += dx02
            if a > b:
                a, b = b, a
            self.draw_fast_hline(a, y, b - a + 1, color)

        y = last + 1
        sa = dx12 * (y - y1)
        sb = dx02 * (y - y0)
        for y in range(y, y2 + 1):
            a = x1 + _cdiv(sa, dy12)
            b = x0 + _cdiv(sb, dy02)
            sa += dx12
            sb += dx02
            if a > b:
                a, b = b, a
            self.draw_fast_hline(a, y, b - a + 1, color)

    def draw_char(self, x: int, y: int, c: int, color: int, bg: int, size: int) -> None:
        """Draw glyph c at (x, y) scaled by size; bg equal to color means transparent."""
        if (
            x >= WIDTH
            or y >= HEIGHT
            or x + _GLYPH_COLUMNS * size - 1 < 0
            or y + _GLYPH_ROWS * size - 1 < 0
        ):
            return
        columns = glyph(c) + b"\x00"
        for i, line in enumerate(columns):
            for j in range(_GLYPH_ROWS):
                if line & 0x1:
                    shade = color
                elif bg != color:
                    shade = bg
                else:
                    line >>= 1
                    continue
                if size == 1:
                    self.draw_pixel(x + i, y + j, shade)
                else:
                    self.fill_rect(x + i * size, y + j * size, size, size, shade)
                line >>= 1

    def outstr(self, text: str) -> None:
        """Draw text at the cursor, advancing it one cell per character."""
        for ch in text:
            self.draw_char(
                self.cursor_x, self.cursor_y, ord(ch),
                self.text_color, self.text_bg_color, self.text_size,
            )
            self.cursor_x += _GLYPH_COLUMNS * self.text_size

    def set_cursor(self, x: int, y: int) -> None:
        """Move the text cursor."""
        self.cursor_x = x
        self.cursor_y = y

    def set_text_size(self, size: int) -> None:
        """Set the text scale; zero or less means 1."""
        self.text_size = size if size > 0 else 1

    def set_text_color(self, color: int, bg: int) -> None:
        """Set the text foreground and background colours."""
        self.text_color = color
        self.text_bg_color = bg

    def set_text_wrap(self, wrap: bool) -> None:
        """Set whether text wraps at the right edge."""
        self.wrap = bool(wrap)

    def width(self) -> int:
        """Return the display width in pixels."""
        return WIDTH

    def height(self) -> int:
        """Return the display height in pixels."""
        return HEIGHT