"""Interactive fractal window and the command-line entry point."""

import sys

import numpy as np

from fractscope.args import FractalKind, UsageError, parse_args
from fractscope.formulas import MAX_ITER
from fractscope.render import render
from fractscope.view import (
    HEIGHT,
    PAN_STEP,
    PHOENIX_SCROLL_DOWN_FACTOR,
    WIDTH,
    Palette,
    PanZoomView,
    ScaleView,
)

BASIC_FLAG = "--basic"

_PAN_KEYS = {
    "up": (0.0, -PAN_STEP),
    "down": (0.0, PAN_STEP),
    "left": (-PAN_STEP, 0.0),
    "right": (PAN_STEP, 0.0),
}


def _to_rgb(pixels):
    """Turn ``(height, width)`` RGBA words into a ``(width, height, 3)`` array over black."""
    words = np.asarray(pixels, dtype=np.uint32)
    alpha = (words & 0xFF).astype(np.uint32)
    channels = [((words >> shift) & 0xFF) * alpha // 255 for shift in (24, 16, 8)]
    rgb = np.stack(channels, axis=-1).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


class FractalWindow:
    """State and event handling of one fractal window.

    The plain viewer zooms about the centre and only reacts to Escape; the
    extended viewer pans with the arrow keys, changes colour intensity with
    "1" and "2", and zooms about the mouse pointer.
    """

    def __init__(self, spec, extended=False, width=WIDTH, height=HEIGHT, max_iter=MAX_ITER):
        self.spec = spec
        self.extended = extended
        self.width = width
        self.height = height
        self.max_iter = max_iter
        self.running = True
        if extended:
            if spec.kind is FractalKind.PHOENIX:
                self.view = PanZoomView(scroll_down_factor=PHOENIX_SCROLL_DOWN_FACTOR)
            else:
                self.view = PanZoomView()
            self.palette = Palette()
        else:
            self.view = ScaleView()
            self.palette = None

    @property
    def title(self):
        """Caption of the window."""
        return self.spec.kind.title

    def handle_key(self, key):
        """React to a key given by name; return whether the image must be redrawn."""
        if key == "escape":
            self.running = False
            return False
        if not self.extended:
            return False
        if key == "1":
            return self.palette.brighten()
        if key == "2":
            return self.palette.darken()
        step = _PAN_KEYS.get(key)
        if step is None:
            return False
        self.view.pan(*step)
        return True

    def handle_scroll(self, ydelta, mouse_pos):
        """Zoom for a wheel movement with the pointer at ``mouse_pos``; return True."""
        if self.extended:
            x_pos, y_pos = mouse_pos
            self.view.zoom_at(x_pos, y_pos, ydelta, self.width, self.height)
        else:
            self.view.scroll(ydelta)
        return True

    def frame(self):
        """Render the current view as a ``(height, width)`` array of RGBA words."""
        intensity = self.palette.intensity if self.palette is not None else None
        return render(
            self.spec,
            self.view.bounds(),
            self.width,
            self.height,
            intensity,
            self.max_iter,
        )

    def run(self):
        """Open the window and process events until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            key_event = pygame.KEYUP if self.extended else pygame.KEYDOWN
            redraw = True
            while self.running:
                if redraw:
                    pygame.surfarray.blit_array(screen, _to_rgb(self.frame()))
                    pygame.display.flip()
                    redraw = False
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == key_event:
                        redraw = self.handle_key(pygame.key.name(event.key)) or redraw
                    elif event.type == pygame.MOUSEWHEEL:
                        redraw = self.handle_scroll(event.y, pygame.mouse.get_pos()) or redraw
        finally:
            pygame.quit()


def main(argv=None):
    """Run the viewer; a leading ``--basic`` selects the plain one. Return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    extended = True
    if args and args[0] == BASIC_FLAG:
        extended = False
        args = args[1:]
    try:
        spec = parse_args(args, extended=extended)
    except UsageError as error:
        stream = sys.stdout if error.status == 0 else sys.stderr
        print(error.message, file=stream)
        return error.status
    FractalWindow(spec, extended=extended).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())