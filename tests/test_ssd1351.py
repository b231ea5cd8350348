import pytest

from oledgfx.ssd1351 import (
    HEIGHT,
    SSD1351,
    WIDTH,
    Command,
    SimulatedPanel,
    color565,
)

RED = 0xF800
GREEN = 0x07E0
MAGENTA = 0xF81F


@pytest.fixture
def driver():
    return SSD1351()


def test_color565_primaries():
    assert color565(255, 0, 0) == RED
    assert color565(0, 255, 0) == GREEN
    assert color565(0, 0, 255) == 0x001F
    assert color565(255, 255, 255) == 0xFFFF
    assert color565(0, 0, 0) == 0x0000


def test_color565_discards_low_bits():
    assert color565(7, 3, 7) == 0


def test_draw_pixel_wire_bytes(driver):
    driver.draw_pixel(10, 20, MAGENTA)
    assert driver.panel.traffic == [
        ("command", Command.SETCOLUMN),
        ("data", 10),
        ("data", WIDTH - 1),
        ("command", Command.SETROW),
        ("data", 20),
        ("data", HEIGHT - 1),
        ("command", Command.WRITERAM),
        ("data", MAGENTA >> 8),
        ("data", MAGENTA & 0xFF),
    ]


def test_draw_pixel_stores_colour(driver):
    driver.draw_pixel(3, 7, RED)
    assert driver.panel.pixel(3, 7) == RED
    assert driver.panel.pixel(4, 7) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)])
def test_draw_pixel_off_panel_sends_nothing(driver, x, y):
    driver.draw_pixel(x, y, RED)
    assert driver.panel.traffic == []


def test_fill_screen_covers_every_pixel(driver):
    driver.fill_screen(GREEN)
    panel = driver.panel
    assert all(panel.pixel(x, y) == GREEN for y in range(HEIGHT) for x in range(WIDTH))
    data = [b for kind, b in panel.traffic if kind == "data"]
    assert len(data) == 4 + WIDTH * HEIGHT * 2


def test_fill_rect_interior(driver):
    driver.fill_rect(2, 3, 4, 5, RED)
    panel = driver.panel
    inside = {(x, y) for x in range(2, 6) for y in range(3, 8)}
    for y in range(10):
        for x in range(10):
            assert panel.pixel(x, y) == (RED if (x, y) in inside else 0)


def test_fill_rect_clamp_leaves_last_column(driver):
    driver.fill_rect(120, 10, 20, 2, RED)
    panel = driver.panel
    assert all(panel.pixel(x, 10) == RED for x in range(120, WIDTH - 1))
    assert panel.pixel(WIDTH - 1, 10) == 0
    assert panel.pixel(120, 12) == 0


@pytest.mark.parametrize("x, y", [(WIDTH, 0), (0, HEIGHT), (-1, 0)])
def test_fill_rect_origin_off_panel(driver, x, y):
    driver.fill_rect(x, y, 4, 4, RED)
    assert driver.panel.traffic == []


def test_vertical_line(driver):
    driver.draw_fast_vline(5, 3, 4, GREEN)
    panel = driver.panel
    assert [panel.pixel(5, y) for y in range(3, 7)] == [GREEN] * 4
    assert panel.pixel(5, 2) == 0
    assert panel.pixel(5, 7) == 0


def test_vertical_line_clamped_short_of_bottom(driver):
    driver.draw_fast_vline(0, 100, 50, GREEN)
    panel = driver.panel
    assert all(panel.pixel(0, y) == GREEN for y in range(100, HEIGHT - 1))
    assert panel.pixel(0, HEIGHT - 1) == 0


def test_horizontal_line(driver):
    driver.draw_fast_hline(4, 9, 3, RED)
    panel = driver.panel
    assert [panel.pixel(x, 9) for x in range(3, 8)] == [0, RED, RED, RED, 0]


@pytest.mark.parametrize("method", ["draw_fast_hline", "draw_fast_vline"])
def test_negative_length_line_sends_nothing(driver, method):
    getattr(driver, method)(0, 0, -1, RED)
    assert driver.panel.traffic == []


def test_invert(driver):
    driver.invert(True)
    assert driver.panel.inverted is True
    driver.invert(False)
    assert driver.panel.inverted is False
    assert driver.panel.traffic == [
        ("command", Command.INVERTDISPLAY),
        ("command", Command.NORMALDISPLAY),
    ]


def test_begin_sequence(driver):
    driver.begin()
    traffic = driver.panel.traffic
    assert traffic[:4] == [
        ("command", Command.COMMANDLOCK),
        ("data", 0x12),
        ("command", Command.COMMANDLOCK),
        ("data", 0xB1),
    ]
    assert traffic[-1] == ("command", Command.DISPLAYON)
    assert ("command", 0xF1) in traffic
    assert driver.panel.display_on is True
    assert driver.panel.inverted is False


def test_go_to_streams_along_row(driver):
    driver.go_to(3, 4)
    for color in (RED, GREEN):
        driver.write_data(color >> 8)
        driver.write_data(color)
    assert driver.panel.pixel(3, 4) == RED
    assert driver.panel.pixel(4, 4) == GREEN


def test_go_to_off_panel_sends_nothing(driver):
    driver.go_to(WIDTH, 0)
    driver.go_to(0, HEIGHT)
    assert driver.panel.traffic == []


def test_write_data_keeps_low_byte(driver):
    driver.write_data(0x1234)
    assert driver.panel.traffic == [("data", 0x34)]


def test_panel_rejects_non_byte():
    panel = SimulatedPanel()
    with pytest.raises(ValueError):
        panel.write_data(256)
    with pytest.raises(ValueError):
        panel.write_command(-1)


def test_panel_pixel_out_of_range():
    panel = SimulatedPanel()
    with pytest.raises(IndexError):
        panel.pixel(WIDTH, 0)
    with pytest.raises(IndexError):
        panel.pixel(0, -1)


def test_custom_panel_receives_bytes():
    panel = SimulatedPanel()
    driver = SSD1351(panel)
    driver.draw_pixel(0, 0, RED)
    assert driver.panel is panel
    assert panel.pixel(0, 0) == RED