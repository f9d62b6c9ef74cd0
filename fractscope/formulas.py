"""Escape-time formulas and pixel colour functions."""

MAX_ITER = 1000
ESCAPE_RADIUS_SQUARED = 4.0

_MASK32 = 0xFFFFFFFF


def map_range(value, old_min, old_max, new_min, new_max):
    """Linearly map ``value`` from one interval onto another."""
    return (value - old_min) * (new_max - new_min) / (old_max - old_min) + new_min


def julia_iter(zr, zi, cr, ci, max_iter=MAX_ITER):
    """Count iterations of z -> z^2 + c before |z| reaches 2, up to ``max_iter``."""
    iteration = 0
    while iteration < max_iter and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        iteration += 1
    return iteration


def mandelbrot_iter(cr, ci, max_iter=MAX_ITER):
    """Count iterations of z -> z^2 + c starting from z = 0."""
    return julia_iter(0.0, 0.0, cr, ci, max_iter)


def phoenix_iter(zr, zi, cr, ci, pr, pi, max_iter=MAX_ITER):
    """Count iterations of the Phoenix map z' = z^2 + c + p * z_prev."""
    iteration = 0
    prev_r, prev_i = zr, zi
    while iteration < max_iter and zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED:
        next_r = zr * zr - zi * zi + cr + pr * prev_r - pi * prev_i
        next_i = 2.0 * zr * zi + ci + pr * prev_i + pi * prev_r
        prev_r, prev_i = zr, zi
        zr, zi = next_r, next_i
        iteration += 1
    return iteration


def _pack(red, green, blue, alpha):
    # Channels are allowed to exceed a byte; they spill into the neighbouring
    # lanes and the result is kept to 32 bits, as an RGBA pixel word.
    return ((red << 24) | (green << 16) | (blue << 8) | alpha) & _MASK32


def basic_color(iteration, max_iter):
    """Return the 32-bit RGBA colour of the plain viewer for an iteration count."""
    fade = 1 - iteration / max_iter
    return _pack(
        int(8 * fade * 255),
        int(80 * fade * 255),
        int(800 * fade * 255),
        0xAA,
    )


def shaded_color(iteration, max_iter, intensity):
    """Return the 32-bit RGBA colour of the extended viewer at a given intensity."""
    fade = 1 - iteration / max_iter
    return _pack(
        int(8 * intensity * fade * 255),
        int(10 * intensity * fade * 255),
        int(20 * intensity * fade * 255),
        0xFF,
    )