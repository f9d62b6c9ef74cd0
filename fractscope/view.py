"""Viewport state: which part of the complex plane is shown and how it is shaded."""

from dataclasses import dataclass

WIDTH = 800
HEIGHT = 800

BASE_EXTENT = 2.0
SCROLL_SCALE = 0.9
PAN_STEP = 0.02
SCROLL_UP_FACTOR = 1.1
SCROLL_DOWN_FACTOR = 0.909
PHOENIX_SCROLL_DOWN_FACTOR = 0.9

MIN_INTENSITY = 1
MAX_INTENSITY = 20


@dataclass
class ScaleView:
    """A square view centred on the origin, sized by a single scale factor."""

    scale: float = 1.0

    def scroll(self, ydelta):
        """Shrink the view when scrolling up and widen it when scrolling down."""
        if ydelta > 0:
            self.scale *= SCROLL_SCALE
        elif ydelta < 0:
            self.scale /= SCROLL_SCALE

    def bounds(self):
        """Return ``(xmin, xmax, ymin, ymax)`` of the visible plane."""
        extent = BASE_EXTENT * self.scale
        return (-extent, extent, -extent, extent)


@dataclass
class PanZoomView:
    """A view whose four edges are scaled separately, so it can pan and zoom at a point.

    Each field multiplies the base extent of 2 on its side: the left edge lies at
    ``-2 * xmin`` and the right edge at ``2 * xmax``, likewise for y.
    """

    xmin: float = 1.0
    xmax: float = 1.0
    ymin: float = 1.0
    ymax: float = 1.0
    scroll_down_factor: float = SCROLL_DOWN_FACTOR

    def pan(self, x_step, y_step):
        """Move the view; positive steps move it right and down."""
        self.xmin += x_step * -2
        self.xmax += x_step * 2
        self.ymin += y_step * -2
        self.ymax += y_step * 2

    def zoom_at(self, x_pos, y_pos, ydelta, width=WIDTH, height=HEIGHT):
        """Scale the view about the plane point under pixel ``(x_pos, y_pos)``.

        Scrolling up enlarges the visible area; anything else shrinks it.
        """
        left, right, top, bottom = self.bounds()
        mouse_x = left + (x_pos / width) * (right - left)
        mouse_y = top + (y_pos / height) * (bottom - top)
        factor = SCROLL_UP_FACTOR if ydelta > 0 else self.scroll_down_factor
        self.xmin = (mouse_x + (left - mouse_x) * factor) / -2.0
        self.xmax = (mouse_x + (right - mouse_x) * factor) / 2.0
        self.ymin = (mouse_y + (top - mouse_y) * factor) / -2.0
        self.ymax = (mouse_y + (bottom - mouse_y) * factor) / 2.0

    def bounds(self):
        """Return ``(xmin, xmax, ymin, ymax)`` of the visible plane."""
        return (
            -BASE_EXTENT * self.xmin,
            BASE_EXTENT * self.xmax,
            -BASE_EXTENT * self.ymin,
            BASE_EXTENT * self.ymax,
        )


@dataclass
class Palette:
    """Colour intensity of the extended viewer, kept between 1 and 20."""

    intensity: int = MIN_INTENSITY

    def brighten(self):
        """Raise the intensity by one step; return whether it changed."""
        if self.intensity < MAX_INTENSITY:
            self.intensity += 1
            return True
        return False

    def darken(self):
        """Lower the intensity by one step; return whether it changed."""
        if self.intensity > MIN_INTENSITY:
            self.intensity -= 1
            return True
        return False