"""Run configuration for the Game of Life demo."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SimulationConfig:
    """Settings for one simulation run.

    Defaults reproduce the desktop demo: 19 pixel cells and one
    generation every 200 ms.
    """

    cell_size: int = 19
    step_interval_ms: int = 200
    fps: int = 60
    title: str = "Game of Life"
    seed: str = "demo"
    max_generations: Optional[int] = None

    def __post_init__(self):
        """Validate configuration after construction."""
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1")

        if self.step_interval_ms < 1:
            raise ValueError("step_interval_ms must be at least 1")

        if self.fps < 1:
            raise ValueError("fps must be at least 1")

        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError("max_generations must be non-negative")
