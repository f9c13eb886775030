"""Frontend interfaces for the Game of Life."""

from .terminal import TerminalDriver
from .cli import CLIGameOfLife

__all__ = ["TerminalDriver", "CLIGameOfLife"]
