"""Accelerometer access over I2C and the tilt-driven demos built on it."""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol

from .gfx import GFX
from .patterns import Color

BMA222_ADDRESS = 0x18
_DATA_REGISTER = 0x02
_DATA_LENGTH = 6
_FULL_SCALE = 64


class _Bus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, length: int) -> bytes: ...


class SimulatedBus:
    """An I2C bus with one register-file device that auto-increments its pointer."""

    def __init__(
        self,
        registers: Mapping[int, int] | None = None,
        address: int = BMA222_ADDRESS,
    ) -> None:
        self.address = address
        self.registers = bytearray(256)
        for reg, value in (registers or {}).items():
            self.registers[reg] = value
        self._pointer = 0

    def _check(self, address: int) -> None:
        if address != self.address:
            raise ConnectionError(f"no device answers at address 0x{address:02X}")

    def write(self, address: int, data: bytes) -> None:
        """Set the register pointer from the first byte and store any bytes after it."""
        self._check(address)
        data = bytes(data)
        if not data:
            raise ValueError("an I2C write needs at least the register byte")
        self._pointer = data[0]
        for value in data[1:]:
            self.registers[self._pointer] = value
            self._pointer = (self._pointer + 1) & 0xFF

    def read(self, address: int, length: int) -> bytes:
        """Read length bytes starting at the register pointer."""
        self._check(address)
        if length < 0:
            raise ValueError(f"negative read length: {length}")
        result = bytes(self.registers[(self._pointer + k) & 0xFF] for k in range(length))
        self._pointer = (self._pointer + length) & 0xFF
        return result


def read_reg(bus: _Bus, dev_addr: int, reg_offset: int, length: int) -> bytes:
    """Select a register on a device and read length bytes from it."""
    bus.write(dev_addr, bytes([reg_offset]))
    return bus.read(dev_addr, length)


def _scale(value: int) -> int:
    if value > 128:
        value -= 255
    return max(-_FULL_SCALE, min(_FULL_SCALE, value))


def get_acc(bus: _Bus, invert_x: bool = False, invert_y: bool = True) -> tuple[int, int, int]:
    """Read the x, y and z acceleration, each mapped to the range -64..64."""
    data = read_reg(bus, BMA222_ADDRESS, _DATA_REGISTER, _DATA_LENGTH)
    x = 255 - data[1] if invert_x else data[1]
    y = 255 - data[3] if invert_y else data[3]
    z = data[5]
    return _scale(x), _scale(y), _scale(z)


@dataclass
class SlidingBall:
    """A ball that rolls across the display following the board's tilt."""

    gfx: GFX
    radius: int = 4
    max_speed: float = 0.2
    invert_x: bool = False
    invert_y: bool = True
    ball_color: int = Color.MAGENTA
    trail_color: int = Color.GREEN
    position: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.position:
            self.position = [float(self.gfx.width() // 2), float(self.gfx.height() // 2)]

    def _draw(self, color: int) -> None:
        x, y = self.position
        self.gfx.fill_circle(int(x), int(y), self.radius, color)

    def step(self, acc: Sequence[int]) -> tuple[float, float]:
        """Move the ball by one tick of acceleration and redraw it."""
        self._draw(self.trail_color)
        upper = self.gfx.width() - self.radius
        self.position = [
            min(max(p + self.max_speed * a / _FULL_SCALE, self.radius), upper)
            for p, a in zip(self.position, acc[:2])
        ]
        self._draw(self.ball_color)
        return self.position[0], self.position[1]

    def run(self, bus: _Bus, steps: int | None = None) -> tuple[float, float]:
        """Draw the ball and follow the accelerometer; None means run forever."""
        self._draw(self.ball_color)
        ticks = itertools.count() if steps is None else range(steps)
        for _ in ticks:
            self.step(get_acc(bus, self.invert_x, self.invert_y))
        return self.position[0], self.position[1]


def char_demo(gfx: GFX, rng: random.Random | None = None) -> Iterator[tuple[int, int, int]]:
    """Show every character code at triple size, yielding (code, x, y) after each."""
    rng = rng if rng is not None else random.Random()
    for code in range(256):
        gfx.fill_screen(Color.BLACK)
        x = rng.randrange(10)
        y = rng.randrange(10)
        gfx.draw_char(x, y, code, Color.RED, Color.BLACK, 3)
        yield code, x, y