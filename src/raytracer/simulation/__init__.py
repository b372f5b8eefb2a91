"""
The SIMULATION layer drives the model primitives over time.
It only consumes the model; the model knows nothing about it.
"""
from raytracer.simulation.projectile import Environment, Projectile, plot_trajectory, simulate, tick

__all__ = [
    "Environment",
    "Projectile",
    "plot_trajectory",
    "simulate",
    "tick",
]
