"""SSD1351 colour OLED controller: command set, driver and a simulated panel."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

WIDTH = 128
HEIGHT = 128


class Command(IntEnum):
    """Command bytes understood by the SSD1351 controller."""

    SETCOLUMN = 0x15
    SETROW = 0x75
    WRITERAM = 0x5C
    READRAM = 0x5D
    SETREMAP = 0xA0
    STARTLINE = 0xA1
    DISPLAYOFFSET = 0xA2
    DISPLAYALLOFF = 0xA4
    DISPLAYALLON = 0xA5
    NORMALDISPLAY = 0xA6
    INVERTDISPLAY = 0xA7
    FUNCTIONSELECT = 0xAB
    DISPLAYOFF = 0xAE
    DISPLAYON = 0xAF
    PRECHARGE = 0xB1
    DISPLAYENHANCE = 0xB2
    CLOCKDIV = 0xB3
    SETVSL = 0xB4
    SETGPIO = 0xB5
    PRECHARGE2 = 0xB6
    SETGRAY = 0xB8
    USELUT = 0xB9
    PRECHARGELEVEL = 0xBB
    VCOMH = 0xBE
    CONTRASTABC = 0xC1
    CONTRASTMASTER = 0xC7
    MUXRATIO = 0xCA
    COMMANDLOCK = 0xFD
    HORIZSCROLL = 0x96
    STOPSCROLL = 0x9E
    STARTSCROLL = 0x9F


class Transport(Protocol):
    """Anything that can carry command and data bytes to the controller."""

    def write_command(self, byte: int) -> None: ...

    def write_data(self, byte: int) -> None: ...


def _check_byte(byte: int) -> int:
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"not a byte: {byte}")
    return byte


def color565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue into a 16-bit RGB565 colour."""
    c = (r & 0xFF) >> 3
    c <<= 6
    c |= (g & 0xFF) >> 2
    c <<= 5
    c |= (b & 0xFF) >> 3
    return c


class SimulatedPanel:
    """An in-memory SSD1351 that records traffic and keeps display RAM."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self.traffic: list[tuple[str, int]] = []
        self.inverted = False
        self.display_on = False
        self._ram = [[0] * width for _ in range(height)]
        self._command: Command | None = None
        self._params: list[int] = []
        self._columns = (0, width - 1)
        self._rows = (0, height - 1)
        self._col = 0
        self._row = 0
        self._high: int | None = None

    def write_command(self, byte: int) -> None:
        """Receive one command byte."""
        byte = _check_byte(byte)
        self.traffic.append(("command", byte))
        self._params = []
        self._high = None
        try:
            command = Command(byte)
        except ValueError:
            # Some parameters travel on the command channel; they select nothing.
            self._command = None
            return
        self._command = command
        if command is Command.DISPLAYON:
            self.display_on = True
        elif command is Command.DISPLAYOFF:
            self.display_on = False
        elif command is Command.INVERTDISPLAY:
            self.inverted = True
        elif command is Command.NORMALDISPLAY:
            self.inverted = False

    def write_data(self, byte: int) -> None:
        """Receive one data byte."""
        byte = _check_byte(byte)
        self.traffic.append(("data", byte))
        if self._command in (Command.SETCOLUMN, Command.SETROW):
            self._params.append(byte)
            if len(self._params) == 2:
                start, end = self._params
                if self._command is Command.SETCOLUMN:
                    self._columns = (start, end)
                    self._col = start
                else:
                    self._rows = (start, end)
                    self._row = start
        elif self._command is Command.WRITERAM:
            if self._high is None:
                self._high = byte
            else:
                self._store((self._high << 8) | byte)
                self._high = None

    def _store(self, color: int) -> None:
        if 0 <= self._col < self.width and 0 <= self._row < self.height:
            self._ram[self._row][self._col] = color
        self._col += 1
        if self._col > self._columns[1]:
            self._col = self._columns[0]
            self._row += 1
            if self._row > self._rows[1]:
                self._row = self._rows[0]

    def pixel(self, x: int, y: int) -> int:
        """Return the 16-bit colour stored at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is off the panel")
        return self._ram[y][x]


class SSD1351:
    """Driver for a 128x128 SSD1351 panel reached through a byte transport."""

    def __init__(self, panel: Transport | None = None) -> None:
        self.panel = panel if panel is not None else SimulatedPanel()

    def write_command(self, c: int) -> None:
        """Send a command byte; only the low eight bits are sent."""
        self.panel.write_command(c & 0xFF)

    def write_data(self, c: int) -> None:
        """Send a data byte; only the low eight bits are sent."""
        self.panel.write_data(c & 0xFF)

    def _command(self, command: int, *params: int) -> None:
        self.write_command(command)
        for param in params:
            self.write_data(param)

    def _window(self, x0: int, x1: int, y0: int, y1: int) -> None:
        self._command(Command.SETCOLUMN, x0, x1)
        self._command(Command.SETROW, y0, y1)
        self.write_command(Command.WRITERAM)

    def _push(self, color: int, count: int) -> None:
        for _ in range(count):
            self.write_data(color >> 8)
            self.write_data(color)

    def begin(self) -> None:
        """Run the power-up initialisation sequence."""
        self._command(Command.COMMANDLOCK, 0x12)
        self._command(Command.COMMANDLOCK, 0xB1)
        self.write_command(Command.DISPLAYOFF)
        self.write_command(Command.CLOCKDIV)
        self.write_command(0xF1)
        self._command(Command.MUXRATIO, 127)
        self._command(Command.SETREMAP, 0x74)
        self._command(Command.SETCOLUMN, 0x00, 0x7F)
        self._command(Command.SETROW, 0x00, 0x7F)
        self._command(Command.STARTLINE, 96 if HEIGHT == 96 else 0)
        self._command(Command.DISPLAYOFFSET, 0x00)
        self._command(Command.SETGPIO, 0x00)
        self._command(Command.FUNCTIONSELECT, 0x01)
        self.write_command(Command.PRECHARGE)
        self.write_command(0x32)
        self.write_command(Command.VCOMH)
        self.write_command(0x05)
        self.write_command(Command.NORMALDISPLAY)
        self._command(Command.CONTRASTABC, 0xC8, 0x80, 0xC8)
        self._command(Command.CONTRASTMASTER, 0x0F)
        self._command(Command.SETVSL, 0xA0, 0xB5, 0x55)
        self._command(Command.PRECHARGE2, 0x01)
        self.write_command(Command.DISPLAYON)

    def go_to(self, x: int, y: int) -> None:
        """Open a RAM write window from (x, y) to the bottom-right corner."""
        if x >= WIDTH or y >= HEIGHT:
            return
        self._window(x, WIDTH - 1, y, HEIGHT - 1)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        """Fill a rectangle using the controller's window addressing."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT) or w < 0 or h < 0:
            return
        if y + h > HEIGHT:
            h = HEIGHT - y - 1
        if x + w > WIDTH:
            w = WIDTH - x - 1
        self._window(x, x + w - 1, y, y + h - 1)
        self._push(color, w * h)

    def fill_screen(self, color: int) -> None:
        """Fill the whole panel with one colour."""
        self.fill_rect(0, 0, WIDTH, HEIGHT, color)

    def draw_fast_vline(self, x: int, y: int, h: int, color: int) -> None:
        """Draw a vertical line of height h starting at (x, y)."""
        if x >= WIDTH or y >= HEIGHT:
            return
        if y + h > HEIGHT:
            h = HEIGHT - y - 1
        if h < 0:
            return
        self._window(x, x, y, y + h - 1)
        self._push(color, h)

    def draw_fast_hline(self, x: int, y: int, w: int, color: int) -> None:
        """Draw a horizontal line of width w starting at (x, y)."""
        if x >= WIDTH or y >= HEIGHT:
            return
        if x + w > WIDTH:
            w = WIDTH - x - 1
        if w < 0:
            return
        self._window(x, x + w - 1, y, y)
        self._push(color, w)

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points off the panel are ignored."""
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return
        self.go_to(x, y)
        self._push(color, 1)

    def invert(self, on: bool) -> None:
        """Switch the panel between inverted and normal display."""
        self.write_command(Command.INVERTDISPLAY if on else Command.NORMALDISPLAY)