"""Game of Life session: a board plus generation bookkeeping."""

from typing import Deque, Dict
from collections import deque

from .board import Board

TITLE = "Conway's Game of Life — generation {generation}"
QUIT_HINT = "(press any key to quit)"


class GameOfLife:
    """Drives a Board one generation at a time and tracks its history.

    The session knows nothing about timing or input; a frontend decides
    when to call step() and where to put the text from view().
    """

    def __init__(self, board: Board) -> None:
        """Initialize the session with a board.

        Args:
            board: The board to simulate
        """
        self.board = board
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Number of generations advanced so far."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.board.population

    @property
    def population_history(self) -> list:
        """Recent population counts, oldest first."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.board.advance()
        self._generation += 1
        self._update_population_history()

    def run(self, generations: int) -> None:
        """Advance the simulation by a number of generations.

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must not be negative, got {generations}")
        for _ in range(generations):
            self.step()

    def view(self) -> str:
        """Full screen text: title, board and quit hint."""
        return f"{TITLE.format(generation=self._generation)}\n\n{self.board.render()}\n{QUIT_HINT}"

    def reset(self, board: Board) -> None:
        """Start over with a new board."""
        self.board = board
        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and grid figures
        """
        rows, columns = self.board.shape
        return {
            "generation": self._generation,
            "population": self.population,
            "population_density": self.population / (rows * columns),
            "population_history": list(self._population_history),
            "grid_size": (rows, columns),
        }
