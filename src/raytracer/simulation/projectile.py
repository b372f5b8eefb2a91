"""
Projectile Simulation
Advances a projectile through an environment one tick at a time and plots
its flight path onto a Canvas.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

from raytracer.config import DEFAULT_MAX_TICKS
from raytracer.model.canvas import Canvas
from raytracer.model.color import Color
from raytracer.model.tuples import Point, Vector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Projectile:
    position: Point
    velocity: Vector


@dataclass(frozen=True)
class Environment:
    """Constant accelerations applied to the projectile every tick."""
    gravity: Vector
    wind: Vector


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """
    Moves the projectile by its velocity, then lets gravity and wind act on
    the velocity.
    """
    logger.debug(f"Projectile at {projectile.position}")
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position=position, velocity=velocity)


def simulate(
    environment: Environment,
    projectile: Projectile,
    max_ticks: int = DEFAULT_MAX_TICKS
) -> list[Point]:
    """
    Ticks until the projectile is no longer above the ground (y <= 0).

    Args:
        environment: Gravity and wind.
        projectile: Initial state.
        max_ticks: Upper bound on the number of ticks, for trajectories that
            never come down (e.g. no gravity).

    Returns:
        Every visited position, starting with the initial one. The last entry
        is the first position at or below the ground, unless ``max_ticks``
        was reached first.
    """
    if max_ticks < 0:
        raise ValueError(f"max_ticks must be non-negative. Got {max_ticks}.")

    positions = [projectile.position]
    ticks = 0
    while projectile.position.y > 0.0:
        if ticks >= max_ticks:
            logger.warning(f"Projectile still airborne after {max_ticks} ticks, stopping.")
            break
        projectile = tick(environment, projectile)
        positions.append(projectile.position)
        ticks += 1

    logger.info(f"Simulation finished after {ticks} ticks at {projectile.position}.")
    return positions


def plot_trajectory(
    canvas: Canvas,
    positions: Iterable[Point],
    color: Color = Color.red()
) -> int:
    """
    Marks each position on the canvas.

    World y grows upward while canvas rows grow downward, so a position maps
    to column ``round(x)`` and row ``height - 1 - round(y)``. Positions that
    fall outside the canvas, or have a non-finite x or y, are skipped.

    Returns:
        Number of positions written.
    """
    written = 0
    skipped = 0
    for position in positions:
        # round() cannot map inf or nan to a pixel
        if not (math.isfinite(position.x) and math.isfinite(position.y)):
            skipped += 1
            continue
        column = round(position.x)
        row = canvas.height - 1 - round(position.y)
        if 0 <= column < canvas.width and 0 <= row < canvas.height:
            canvas.write_pixel(column, row, color)
            written += 1
        else:
            skipped += 1

    if skipped:
        logger.debug(f"Skipped {skipped} positions outside the {canvas.width}x{canvas.height} canvas.")
    return written
