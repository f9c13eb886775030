"""Bounded Game of Life board."""

from typing import List, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .errors import OutOfBounds

RandomSource = Union[None, int, np.random.Generator]

DEFAULT_LIFE_PROBABILITY = 0.2

LIVE_GLYPH = " * "
DEAD_GLYPH = "   "

# (row, column) offsets of the 8 adjacent positions
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Board:
    """A fixed-size grid of live/dead cells with hard (non-wrapping) edges.

    Cells are stored row-major in a numpy array of shape (rows, columns).
    Positions outside the board never count as live neighbors.

    Transition rule applied by advance():
    - Live cell with fewer than 2 or more than 3 neighbors dies
    - Live cell with 2 or 3 neighbors survives
    - Dead cell with more than 3 neighbors is born
    """

    def __init__(
        self,
        rows: int,
        columns: int,
        rng: RandomSource = None,
        probability: float = DEFAULT_LIFE_PROBABILITY,
    ) -> None:
        """Create a board and populate it randomly.

        Args:
            rows: Number of rows (must be positive)
            columns: Number of columns (must be positive)
            rng: numpy Generator, integer seed, or None for fresh entropy
            probability: Chance each cell starts alive (0.0 to 1.0)

        Raises:
            ValueError: If dimensions are not positive or probability is out of range
        """
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{columns}")
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

        self._rows = rows
        self._columns = columns
        self._cells = np.zeros((rows, columns), dtype=np.int8)

        torch.set_num_threads(1)

        # Reused by neighbor_counts()
        self._torch_input = torch.zeros(1, 1, rows, columns, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        self.randomize(np.random.default_rng(rng), probability)

    @classmethod
    def from_list(cls, data: List[List[int]]) -> "Board":
        """Build a board from a nested list without any random draws.

        Args:
            data: Rows of truthy (alive) / falsy (dead) values

        Returns:
            New Board holding exactly the given cells

        Raises:
            ValueError: If data is empty or its rows differ in length
        """
        if not data or not data[0]:
            raise ValueError("Board data must contain at least one row and one column")
        columns = len(data[0])
        for index, row in enumerate(data):
            if len(row) != columns:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {columns}")

        board = cls(len(data), columns, probability=0.0)
        board._cells[:] = np.array(data, dtype=bool).astype(np.int8)
        return board

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (rows, columns)."""
        return (self._rows, self._columns)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Number of living cells."""
        return int(np.count_nonzero(self._cells))

    def randomize(self, rng: np.random.Generator, probability: float = DEFAULT_LIFE_PROBABILITY) -> None:
        """Redraw every cell independently.

        Args:
            rng: Random generator to draw from
            probability: Chance each cell will be alive (0.0 to 1.0)
        """
        mask = rng.random((self._rows, self._columns)) < probability
        self._cells[mask] = 1
        self._cells[~mask] = 0

    def cell_at(self, row: int, column: int) -> bool:
        """Get the state of a cell.

        Raises:
            OutOfBounds: If the coordinate is outside the board
        """
        OutOfBounds.check(row, column, self._rows, self._columns)
        return bool(self._cells[row, column])

    def set_cell(self, row: int, column: int, alive: bool) -> None:
        """Set the state of a cell.

        Raises:
            OutOfBounds: If the coordinate is outside the board
        """
        OutOfBounds.check(row, column, self._rows, self._columns)
        self._cells[row, column] = 1 if alive else 0

    def count_neighbors(self, row: int, column: int) -> int:
        """Count living neighbors of a single cell.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for d_row, d_column in NEIGHBOR_OFFSETS:
            r, c = row + d_row, column + d_column
            if 0 <= r < self._rows and 0 <= c < self._columns:
                count += int(self._cells[r, c])
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            Array of shape (rows, columns) with neighbor counts for each cell
        """
        self._torch_input[0, 0] = torch.from_numpy((self._cells > 0).astype(np.float32))
        neighbors = F.conv2d(self._torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def advance(self) -> None:
        """Advance the board by one generation."""
        neighbor_counts = self.neighbor_counts()
        cells = self._cells

        # Both masks are taken from the same snapshot before anything is written
        birth_mask = (cells == 0) & (neighbor_counts > 3)
        death_mask = (cells > 0) & ((neighbor_counts < 2) | (neighbor_counts > 3))

        cells[death_mask] = 0
        cells[birth_mask] = 1

    def render(self) -> str:
        """Render the board as text, one line per row and one glyph per cell."""
        lines = []
        for row in self._cells:
            lines.append("".join(LIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
            lines.append("\n")
        return "".join(lines)

    def to_list(self) -> list:
        """Convert the board to a nested list of 0/1 values."""
        return self._cells.tolist()

    def copy(self) -> "Board":
        """Return an independent board with the same cells."""
        return Board.from_list(self.to_list())

    def __eq__(self, other: object) -> bool:
        """Check if two boards hold the same cells."""
        if not isinstance(other, Board):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board(rows={self._rows}, columns={self._columns}, population={self.population})"

