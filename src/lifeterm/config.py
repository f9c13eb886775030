"""Run parameters shared by the frontends."""

from dataclasses import dataclass
from typing import List, Optional
import numpy as np

from .core.board import DEFAULT_LIFE_PROBABILITY

BATCH_GENERATIONS = 20


@dataclass
class SimulationConfig:
    """Parameters for one simulation run."""

    rows: int = 40
    columns: int = 40
    interval: float = 0.5  # seconds between generations
    probability: float = DEFAULT_LIFE_PROBABILITY
    seed: Optional[int] = None
    generations: Optional[int] = None  # None: until a key is pressed

    def validate(self) -> List[str]:
        """Check the parameters.

        Returns:
            List of error messages, empty when the config is usable
        """
        errors = []

        if self.rows <= 0:
            errors.append("Rows must be positive")

        if self.columns <= 0:
            errors.append("Columns must be positive")

        if self.interval < 0:
            errors.append("Interval must not be negative")

        if not 0.0 <= self.probability <= 1.0:
            errors.append("Population rate must be between 0.0 and 1.0")

        if self.generations is not None and self.generations < 0:
            errors.append("Generations must not be negative")

        return errors

    def make_rng(self) -> np.random.Generator:
        """Random generator for board construction, seeded if a seed is set."""
        return np.random.default_rng(self.seed)
