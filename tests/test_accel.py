import itertools
import random

import pytest

from oledgfx.accel import (
    BMA222_ADDRESS,
    SimulatedBus,
    SlidingBall,
    char_demo,
    get_acc,
    read_reg,
)
from oledgfx.gfx import GFX
from oledgfx.patterns import Color
from oledgfx.ssd1351 import SimulatedPanel


def make_gfx():
    return GFX(SimulatedPanel())


def test_read_reg_returns_register_block():
    bus = SimulatedBus({reg: reg * 3 for reg in range(2, 8)})
    assert read_reg(bus, BMA222_ADDRESS, 2, 6) == bytes(reg * 3 for reg in range(2, 8))


def test_read_reg_pointer_advances():
    bus = SimulatedBus({reg: reg + 40 for reg in range(2, 8)})
    first = read_reg(bus, BMA222_ADDRESS, 2, 3)
    rest = bus.read(BMA222_ADDRESS, 3)
    assert first + rest == bytes(reg + 40 for reg in range(2, 8))


def test_read_reg_unknown_device():
    bus = SimulatedBus()
    with pytest.raises(ConnectionError):
        read_reg(bus, 0x19, 2, 6)


def test_write_stores_following_bytes():
    bus = SimulatedBus()
    bus.write(BMA222_ADDRESS, bytes([0x10, 7, 9]))
    assert read_reg(bus, BMA222_ADDRESS, 0x10, 2) == bytes([7, 9])


def test_write_needs_register_byte():
    with pytest.raises(ValueError):
        SimulatedBus().write(BMA222_ADDRESS, b"")


def test_get_acc_plain_values():
    bus = SimulatedBus({3: 10, 5: 12, 7: 20})
    assert get_acc(bus, invert_x=False, invert_y=False) == (10, 12, 20)


def test_get_acc_inversion_flips_sign():
    bus = SimulatedBus({3: 10, 5: 12, 7: 20})
    plain = get_acc(bus, invert_x=False, invert_y=False)
    inverted = get_acc(bus, invert_x=True, invert_y=True)
    assert inverted[0] == -plain[0]
    assert inverted[1] == -plain[1]
    assert inverted[2] == plain[2]


def test_get_acc_default_inverts_only_y():
    bus = SimulatedBus({3: 10, 5: 12, 7: 20})
    default = get_acc(bus)
    explicit = get_acc(bus, invert_x=False, invert_y=True)
    assert default == explicit
    assert default[0] == 10


def test_get_acc_level_board_reads_zero():
    bus = SimulatedBus({3: 0, 5: 255, 7: 0})
    assert get_acc(bus) == (0, 0, 0)


@pytest.mark.parametrize("raw", range(256))
def test_get_acc_stays_in_range(raw):
    bus = SimulatedBus({3: raw, 5: raw, 7: raw})
    assert all(-64 <= v <= 64 for v in get_acc(bus))


def test_ball_starts_centred_and_stays_with_no_tilt():
    gfx = make_gfx()
    ball = SlidingBall(gfx)
    assert ball.step((0, 0, 0)) == (64.0, 64.0)
    assert gfx.panel.pixel(64, 64) == Color.MAGENTA


def test_ball_clamps_at_right_edge_and_leaves_trail():
    gfx = make_gfx()
    ball = SlidingBall(gfx)
    for _ in range(400):
        ball.step((64, 0, 0))
    x, y = ball.position
    assert x == gfx.width() - ball.radius
    assert y == gfx.height() // 2
    assert gfx.panel.pixel(64, 64) == Color.GREEN
    assert gfx.panel.pixel(int(x), int(y)) == Color.MAGENTA


def test_ball_clamps_at_top_left():
    gfx = make_gfx()
    ball = SlidingBall(gfx)
    for _ in range(400):
        ball.step((-64, -64, 0))
    assert ball.position == [ball.radius, ball.radius]


def test_run_follows_bus():
    gfx = make_gfx()
    ball = SlidingBall(gfx)
    start_x, start_y = ball.position
    bus = SimulatedBus({3: 64, 5: 255, 7: 0})
    x, y = ball.run(bus, steps=3)
    assert x == pytest.approx(start_x + 3 * ball.max_speed)
    assert y == start_y
    assert gfx.panel.pixel(int(x), int(y)) == Color.MAGENTA


def test_run_propagates_bus_errors():
    ball = SlidingBall(make_gfx())
    with pytest.raises(ConnectionError):
        ball.run(SimulatedBus(address=0x30), steps=1)


def test_char_demo_frames():
    gfx = make_gfx()
    frames = list(itertools.islice(char_demo(gfx, random.Random(1)), 2))
    assert [code for code, _, _ in frames] == [0, 1]
    for _, x, y in frames:
        assert 0 <= x < 10
        assert 0 <= y < 10
    _, x, y = frames[-1]
    # Glyph 1 starts with column 0x3E: top row clear, second row set.
    assert gfx.panel.pixel(x, y) == Color.BLACK
    assert gfx.panel.pixel(x, y + 3) == Color.RED


def test_char_demo_is_reproducible_with_seed():
    first = list(itertools.islice(char_demo(make_gfx(), random.Random(5)), 3))
    second = list(itertools.islice(char_demo(make_gfx(), random.Random(5)), 3))
    assert first == second