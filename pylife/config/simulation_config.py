"""
Immutable configuration handed to the simulation engine and the renderer.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple, Optional

from .errors import OutOfRange


class Color(NamedTuple):
    name: str  # normalized name, as found in the color table
    rgb: tuple[int, int, int]


@dataclass(frozen=True)
class SimulationConfig:
    """
    Fully resolved settings for one run of the Game of Life.

    Parameters :
    file_path : Path or None, initial state file. None lets the engine use its default seed.
    steps : int, number of generations to run, 0 means run until closed
    rate_seconds : float, delay between two generations
    height_px, width_px : int, window size in pixels
    alive_color, dead_color : Color, colors of living and dead cells
    show_grid : bool, if True grid lines are drawn between cells
    """
    file_path: Optional[Path]
    steps: int
    rate_seconds: float
    height_px: int
    width_px: int
    alive_color: Color
    dead_color: Color
    show_grid: bool = False

    def __post_init__(self):
        if self.steps < 0:
            raise OutOfRange("steps", self.steps, "must be 0 or more")
        if not (math.isfinite(self.rate_seconds) and self.rate_seconds > 0):
            raise OutOfRange("rate", self.rate_seconds, "must be a positive number of seconds")
        if self.height_px <= 0:
            raise OutOfRange("height", self.height_px, "must be a positive number of pixels")
        if self.width_px <= 0:
            raise OutOfRange("width", self.width_px, "must be a positive number of pixels")

    @property
    def unbounded(self):
        """True if the simulation should run until the window is closed."""
        return self.steps == 0

    @property
    def window_size(self):
        """(W,H) window size, in the order pygame.display.set_mode expects."""
        return (self.width_px, self.height_px)

    def describe(self):
        """One-line summary, used for logging."""
        source = str(self.file_path) if self.file_path is not None else "<default pattern>"
        steps = "non-stop" if self.unbounded else f"{self.steps} steps"
        grid = ", grid" if self.show_grid else ""
        return (f"{source}: {steps} every {self.rate_seconds}s, "
                f"{self.width_px}x{self.height_px}px, "
                f"alive={self.alive_color.name} dead={self.dead_color.name}{grid}")
