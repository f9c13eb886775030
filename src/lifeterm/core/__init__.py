"""Core cellular automaton logic."""

from .board import Board
from .errors import OutOfBounds, OutOfBoundsKind
from .game import GameOfLife

__all__ = ["Board", "GameOfLife", "OutOfBounds", "OutOfBoundsKind"]
