"""Whole-image rendering of the fractals with numpy."""

import numpy as np

from fractscope.args import FractalKind
from fractscope.formulas import ESCAPE_RADIUS_SQUARED, MAX_ITER
from fractscope.view import HEIGHT, WIDTH

_MASK32 = 0xFFFFFFFF


def coordinate_grid(bounds, width=WIDTH, height=HEIGHT):
    """Return the plane point of every pixel as a ``(height, width)`` complex array.

    Pixel ``(i, j)`` maps linearly from ``[0, width)`` x ``[0, height)`` onto
    ``bounds`` given as ``(xmin, xmax, ymin, ymax)``.
    """
    xmin, xmax, ymin, ymax = (float(value) for value in bounds)
    xs = np.arange(width, dtype=np.float64) * (xmax - xmin) / float(width) + xmin
    ys = np.arange(height, dtype=np.float64) * (ymax - ymin) / float(height) + ymin
    real, imag = np.meshgrid(xs, ys)
    return real + 1j * imag


def _flat_arrays(*values):
    arrays = np.broadcast_arrays(*(np.asarray(v, dtype=np.float64) for v in values))
    shape = arrays[0].shape
    return shape, [a.ravel().copy() for a in arrays]


def _escape_quadratic(zr, zi, cr, ci, max_iter):
    shape, (zr, zi, cr, ci) = _flat_arrays(zr, zi, cr, ci)
    counts = np.zeros(zr.size, dtype=np.int64)
    idx = np.arange(zr.size)
    for _ in range(max_iter):
        alive = zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED
        if not alive.all():
            idx, zr, zi, cr, ci = idx[alive], zr[alive], zi[alive], cr[alive], ci[alive]
        if idx.size == 0:
            break
        zr, zi = zr * zr - zi * zi + cr, 2.0 * zr * zi + ci
        counts[idx] += 1
    return counts.reshape(shape)


def _escape_phoenix(zr, zi, cr, ci, pr, pi, max_iter):
    shape, (zr, zi, cr, ci, pr, pi) = _flat_arrays(zr, zi, cr, ci, pr, pi)
    counts = np.zeros(zr.size, dtype=np.int64)
    idx = np.arange(zr.size)
    prev_r, prev_i = zr.copy(), zi.copy()
    for _ in range(max_iter):
        alive = zr * zr + zi * zi < ESCAPE_RADIUS_SQUARED
        if not alive.all():
            idx = idx[alive]
            zr, zi, prev_r, prev_i = zr[alive], zi[alive], prev_r[alive], prev_i[alive]
            cr, ci, pr, pi = cr[alive], ci[alive], pr[alive], pi[alive]
        if idx.size == 0:
            break
        next_r = zr * zr - zi * zi + cr + pr * prev_r - pi * prev_i
        next_i = 2.0 * zr * zi + ci + pr * prev_i + pi * prev_r
        prev_r, prev_i = zr, zi
        zr, zi = next_r, next_i
        counts[idx] += 1
    return counts.reshape(shape)


def mandelbrot_counts(bounds, width=WIDTH, height=HEIGHT, max_iter=MAX_ITER):
    """Escape counts of the Mandelbrot set over the pixels of ``bounds``."""
    grid = coordinate_grid(bounds, width, height)
    return _escape_quadratic(0.0, 0.0, grid.real, grid.imag, max_iter)


def julia_counts(bounds, width=WIDTH, height=HEIGHT, c=0j, max_iter=MAX_ITER):
    """Escape counts of the Julia set for constant ``c`` over the pixels of ``bounds``."""
    grid = coordinate_grid(bounds, width, height)
    c = complex(c)
    return _escape_quadratic(grid.real, grid.imag, c.real, c.imag, max_iter)


def phoenix_counts(bounds, width=WIDTH, height=HEIGHT, c=0j, p=0j, max_iter=MAX_ITER):
    """Escape counts of the Phoenix fractal for constants ``c`` and ``p``."""
    grid = coordinate_grid(bounds, width, height)
    c, p = complex(c), complex(p)
    return _escape_phoenix(
        grid.real, grid.imag, c.real, c.imag, p.real, p.imag, max_iter
    )


def _pack(red, green, blue, alpha):
    packed = (red << 24) | (green << 16) | (blue << 8) | alpha
    return (packed & _MASK32).astype(np.uint32)


def colorize_basic(counts, max_iter=MAX_ITER):
    """Turn escape counts into 32-bit RGBA pixels of the plain viewer."""
    fade = 1 - np.asarray(counts, dtype=np.float64) / max_iter
    return _pack(
        (8 * fade * 255).astype(np.int64),
        (80 * fade * 255).astype(np.int64),
        (800 * fade * 255).astype(np.int64),
        0xAA,
    )


def colorize_shaded(counts, max_iter=MAX_ITER, intensity=1):
    """Turn escape counts into 32-bit RGBA pixels of the extended viewer."""
    fade = 1 - np.asarray(counts, dtype=np.float64) / max_iter
    return _pack(
        (8 * intensity * fade * 255).astype(np.int64),
        (10 * intensity * fade * 255).astype(np.int64),
        (20 * intensity * fade * 255).astype(np.int64),
        0xFF,
    )


def render(spec, bounds, width=WIDTH, height=HEIGHT, intensity=None, max_iter=MAX_ITER):
    """Render ``spec`` over ``bounds`` into a ``(height, width)`` array of RGBA words.

    With ``intensity`` of None the plain palette is used, otherwise the
    extended one at that intensity.
    """
    if spec.kind is FractalKind.MANDELBROT:
        counts = mandelbrot_counts(bounds, width, height, max_iter)
    elif spec.kind is FractalKind.JULIA:
        counts = julia_counts(bounds, width, height, spec.c, max_iter)
    else:
        counts = phoenix_counts(bounds, width, height, spec.c, spec.p, max_iter)
    if intensity is None:
        return colorize_basic(counts, max_iter)
    return colorize_shaded(counts, max_iter, intensity)