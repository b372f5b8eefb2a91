"""Command-line interface."""
import logging
from typing import Optional

import click
import typer

from raytracer.config import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_MAX_TICKS,
    DEFAULT_PROJECTILE_SPEED,
)
from raytracer.logging_config import setup_logging
from raytracer.model import Canvas, Color, Point, Vector
from raytracer.simulation import Environment, Projectile, plot_trajectory, simulate

# __name__ is "__main__" under "python -m", which the package handlers would not see
logger = logging.getLogger("raytracer.cli")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

app = typer.Typer(
    name="raytracer",
    help="Fire a projectile and plot its trajectory onto a canvas.",
    add_completion=False,
)


@app.command()
def run(
    width: int = typer.Option(DEFAULT_CANVAS_WIDTH, min=0, help="Canvas width in pixels"),
    height: int = typer.Option(DEFAULT_CANVAS_HEIGHT, min=0, help="Canvas height in pixels"),
    speed: float = typer.Option(DEFAULT_PROJECTILE_SPEED, help="Launch speed"),
    max_ticks: int = typer.Option(DEFAULT_MAX_TICKS, min=0, help="Upper bound on simulation ticks"),
    log_level: str = typer.Option(
        "info",
        click_type=click.Choice(LOG_LEVELS, case_sensitive=False),
        help="Logging verbosity",
    ),
    log_file: Optional[str] = typer.Option(None, help="Also write the log to this file"),
) -> int:
    """Run the projectile simulation and report how much of it fits on the canvas."""
    setup_logging(level=log_level, log_file=log_file)

    projectile = Projectile(
        position=Point(0.0, 1.0, 0.0),
        velocity=Vector(1.0, 1.8, 0.0).normalise() * speed,
    )
    environment = Environment(
        gravity=Vector(0.0, -0.1, 0.0),
        wind=Vector(-0.01, 0.0, 0.0),
    )

    positions = simulate(environment, projectile, max_ticks=max_ticks)

    canvas = Canvas(width, height)
    written = plot_trajectory(canvas, positions, Color.red())
    logger.info(f"Plotted {written} of {len(positions)} positions onto a {canvas.width}x{canvas.height} canvas.")
    return written


if __name__ == "__main__":
    app()
