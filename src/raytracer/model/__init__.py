"""
The MODEL layer contains pure value types and the pixel buffer.
It has NO knowledge of logging configuration, files or the command line.
It deals with Geometry (points, vectors) and Color (colors, canvas).
"""
from raytracer.model.canvas import Canvas, CanvasRow
from raytracer.model.color import Color
from raytracer.model.tuples import Point, Tuple, Vector

__all__ = [
    "Canvas",
    "CanvasRow",
    "Color",
    "Point",
    "Tuple",
    "Vector",
]
