"""
raytracer - geometric and color primitives for a ray tracer.

Points, Vectors, Colors and a Canvas to draw them into, plus a projectile
simulation that exercises them together.
"""
from importlib.metadata import PackageNotFoundError, version

from raytracer.model import Canvas, CanvasRow, Color, Point, Tuple, Vector
from raytracer.simulation import Environment, Projectile, plot_trajectory, simulate, tick

try:
    __version__ = version("raytracer")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Canvas",
    "CanvasRow",
    "Color",
    "Environment",
    "Point",
    "Projectile",
    "Tuple",
    "Vector",
    "plot_trajectory",
    "simulate",
    "tick",
]
