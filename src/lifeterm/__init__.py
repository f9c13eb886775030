"""Terminal Game of Life built around a bounded board engine."""

__version__ = "0.1.0"

from .core.board import Board
from .core.errors import OutOfBounds, OutOfBoundsKind
from .core.game import GameOfLife

__all__ = ["Board", "GameOfLife", "OutOfBounds", "OutOfBoundsKind"]
