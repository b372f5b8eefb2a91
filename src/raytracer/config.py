"""
Configuration & Global Constants
================================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Consistency: every tolerant comparison in the model layer uses the same
   EPSILON, so Point, Vector and Color agree on what "equal" means.
2. Defaults: the command-line interface and the simulation read their
   default sizes and bounds from here instead of hardcoding them.

Exports:
    EPSILON (float): Machine epsilon of a 64-bit float.
    LOG_FORMAT (str): Format string used by the package log handlers.
    LOG_DATE_FORMAT (str): Time format used by the package log handlers.
"""
from typing import Final

import numpy as np


# Tolerant equality
EPSILON: Final[float] = float(np.finfo(np.float64).eps)

# Logging
LOG_FORMAT: Final[str] = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: Final[str] = '%H:%M:%S'

# Canvas
DEFAULT_CANVAS_WIDTH: Final[int] = 900
DEFAULT_CANVAS_HEIGHT: Final[int] = 550

# Projectile simulation
DEFAULT_PROJECTILE_SPEED: Final[float] = 11.25
DEFAULT_MAX_TICKS: Final[int] = 10_000
