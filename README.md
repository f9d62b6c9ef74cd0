# fractscope

An interactive viewer for three escape-time fractals: the Mandelbrot set,
Julia sets and the Phoenix fractal. Each one is drawn in an 800×800 window
(with pygame) with up to 1000 iterations per pixel.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
fractscope Mandelbrot
fractscope Julia <a> <b>
fractscope Phoenix <a> <b> <c> <d>
```

- `Mandelbrot` takes no further arguments.
- `Julia <a> <b>` draws the Julia set for the constant `c = a + b·i`.
- `Phoenix <a> <b> <c> <d>` draws the Phoenix fractal with constant
  `a + b·i` and feedback coefficient `c + d·i`.

Every number has to lie between -2 and 2 and may hold only digits, at most
one decimal point (not at the end), signs, spaces and tabs. Examples:

```
fractscope Julia -0.8 0.156
fractscope Phoenix 0.5667 0 -0.5 0
```

A wrong fractal name, a wrong number of arguments, a malformed number or an
out-of-range value prints a usage message on standard error and exits with
status 1.

### The plain viewer

A leading `--basic` selects a simpler viewer that knows only Mandelbrot and
Julia, uses a different palette and has fewer controls:

```
fractscope --basic Mandelbrot
fractscope --basic Julia -0.8 0.156
```

Run with `--basic` and nothing else, it prints a short usage line on
standard output and exits with status 0.

## Controls

Default viewer (keys act when they are released):

| Input            | Effect                                              |
|------------------|-----------------------------------------------------|
| Mouse wheel up   | Zoom out around the pointer                         |
| Mouse wheel down | Zoom in around the pointer                          |
| Arrow keys       | Move the view in that direction                     |
| `1`              | Brighten the palette (up to level 20)               |
| `2`              | Darken the palette (down to level 1)                |
| `Esc`            | Close the window                                    |

Plain viewer (`--basic`):

| Input            | Effect                                   |
|------------------|------------------------------------------|
| Mouse wheel up   | Zoom in around the centre                |
| Mouse wheel down | Zoom out around the centre               |
| `Esc`            | Close the window                         |

Closing the window also ends the program.

## Using it as a library

- `fractscope.formulas`: per-point iteration counts (`mandelbrot_iter`,
  `julia_iter`, `phoenix_iter`), pixel colours (`basic_color`,
  `shaded_color`) and `map_range`.
- `fractscope.render`: vectorised rendering with numpy
  (`coordinate_grid`, `mandelbrot_counts`, `julia_counts`, `phoenix_counts`,
  `colorize_basic`, `colorize_shaded`, `render`). Images are
  `(height, width)` arrays of 32-bit RGBA words.
- `fractscope.view`: view state (`ScaleView`, `PanZoomView`, `Palette`).
- `fractscope.args`: argument handling (`parse_args`, `is_numeric_arg`,
  `parse_number`, `FractalKind`, `FractalSpec`, `UsageError`).
- `fractscope.app`: the window (`FractalWindow`, whose `frame()` renders the
  current view without opening a window) and the `main` entry point.

For example:

```python
from fractscope.args import parse_args
from fractscope.render import render
from fractscope.view import PanZoomView

spec = parse_args(["Julia", "-0.8", "0.156"], extended=True)
pixels = render(spec, PanZoomView().bounds(), 200, 200, intensity=1)
```

## What it does not do

There is no way to save an image to a file, and iteration limit and window
size are fixed on the command line.