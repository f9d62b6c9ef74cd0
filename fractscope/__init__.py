"""Interactive viewer for Mandelbrot, Julia and Phoenix fractals."""

__version__ = "0.1.0"
__all__ = ["formulas", "args", "view", "render", "app"]