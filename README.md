# oledgfx

oledgfx draws on a 128×128 SSD1351 colour OLED panel. It needs no hardware to
run. The package contains:

- the SSD1351 command set and a driver that sends command and data bytes to a
  panel;
- a simulated panel that carries out those bytes and holds the colour of every
  pixel;
- graphics primitives: lines, rectangles, rounded rectangles, circles,
  triangles, and characters in the standard 5×7 font;
- the panel's demo and test patterns;
- an accelerometer reader and a "sliding ball" demo that runs on a simulated
  I2C bus.

## Modules

| Module | Contents |
| --- | --- |
| `oledgfx.font` | `FONT` holds the raw table. `glyph(code)` returns the five column bytes of a character, for codes 0–255. |
| `oledgfx.ssd1351` | `Command`, `SSD1351`, `SimulatedPanel`, `color565(r, g, b)` |
| `oledgfx.gfx` | `GFX` is an `SSD1351` that adds circles, lines, rectangles, triangles, characters and text. |
| `oledgfx.patterns` | `Color` and the patterns `fast_lines`, `draw_rects`, `fill_rects`, `fill_circles`, `draw_circles`, `triangles`, `round_rects`, `lines`, `lcd_test_pattern`, `lcd_test_pattern2` |
| `oledgfx.accel` | `SimulatedBus`, `read_reg`, `get_acc`, `SlidingBall`, `char_demo` |

## Example

```python
from oledgfx.gfx import GFX
from oledgfx.patterns import Color
from oledgfx.ssd1351 import SimulatedPanel, color565

panel = SimulatedPanel()
gfx = GFX(panel)
gfx.begin()                                  # power-up command sequence
gfx.fill_screen(Color.BLACK)
gfx.fill_circle(64, 64, 10, color565(255, 0, 0))

gfx.set_cursor(0, 0)
gfx.set_text_color(Color.WHITE, Color.BLACK)
gfx.outstr("Hi")

assert panel.pixel(64, 64) == 0xF800
```

## Panel and driver

- `SSD1351(panel)` takes any object that has `write_command(byte)` and
  `write_data(byte)`. If you pass no panel, it creates a `SimulatedPanel`.
- `SSD1351` sends only the low eight bits of each value.
- Drawing works through the controller's column and row windows:
  - `go_to` opens a window;
  - `fill_rect`, `fill_screen`, `draw_fast_hline` and `draw_fast_vline` fill
    one;
  - `draw_pixel` ignores points that fall off the panel.
- When a rectangle or line runs past the right or bottom edge, it is clipped to
  one pixel short of that edge.
- `SimulatedPanel` records every byte it receives in `traffic`. It tracks
  `display_on` and `inverted`. `pixel(x, y)` returns the stored 16-bit colour
  and raises `IndexError` for a point off the panel. A byte that is not a known
  command selects no command. A value outside 0–255 raises `ValueError`.

## Colours

- Colours are 16-bit RGB565 values.
- `color565(r, g, b)` packs 8-bit channels into one colour.
- `Color` names the common colours: `BLACK`, `BLUE`, `GREEN`, `CYAN`, `RED`,
  `MAGENTA`, `YELLOW` and `WHITE`.

## Text

- `draw_char(x, y, c, color, bg, size)` draws one glyph in a 6×8 cell, scaled
  by `size`.
- When `bg` is the same as `color`, the background is left untouched.
- `outstr(text)` draws at the cursor and moves the cursor right by one cell for
  each character. It does not wrap to a new line: `set_text_wrap` only stores
  the `wrap` flag.

## Accelerometer demo

- `SimulatedBus(registers)` acts as one I2C device at address `0x18`. The
  device keeps a register pointer that moves forward after each byte. Any other
  address raises `ConnectionError`.
- `read_reg(bus, dev_addr, reg_offset, length)` selects a register and reads
  `length` bytes from it.
- `get_acc(bus, invert_x, invert_y)` returns the x, y and z acceleration. Each
  value is mapped into the range -64..64. By default the y axis is inverted.
- `SlidingBall(gfx)` starts at the centre of the screen.
  - `step(acc)` moves the ball by one reading, keeps it inside the screen, and
    redraws it.
  - `run(bus, steps)` repeats `step` for `steps` readings, or forever when
    `steps` is `None`.
- `char_demo(gfx, rng)` is a generator. It clears the screen and draws each of
  the 256 characters at triple size, at a random offset. After each one it
  yields `(code, x, y)`.

## What the package does not do

- It has no transport to a real panel or a real I2C bus. Only the simulated
  panel and the simulated bus are provided.
- It has no command-line program.
- It does not rotate the display. Sizes are fixed at 128×128.

## Tests

```
pip install -e ".[test]"
pytest
```