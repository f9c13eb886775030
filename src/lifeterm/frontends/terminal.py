"""Timed terminal loop that redraws a GameOfLife until a key is pressed."""

import logging
import select
import sys
import termios
import time
import tty
from typing import Callable, Optional, TextIO

from ..core.game import GameOfLife

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
RESET_ATTRIBUTES = "\033[0m"


class TerminalDriver:
    """Advance a game on a fixed schedule and draw it to a terminal.

    Any input on stdin ends the loop. When stdin is a TTY it is switched
    to cbreak mode so a single keypress is seen without Enter; the
    original settings are restored on exit.
    """

    def __init__(
        self,
        game: GameOfLife,
        interval: float = 0.5,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clock: Callable[[], float] = time.monotonic,
        max_generations: Optional[int] = None,
    ) -> None:
        """Initialize the driver.

        Args:
            game: Session to advance and draw
            interval: Seconds between generations
            stdin: Input stream watched for keypresses (default sys.stdin)
            stdout: Output stream drawn to (default sys.stdout)
            clock: Monotonic time source in seconds
            max_generations: Stop after this many generations (None for no limit)
        """
        self.game = game
        self.interval = interval
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clock = clock
        self.max_generations = max_generations
        self._old_settings = None

    def run(self) -> int:
        """Run until a key is pressed or the generation limit is reached.

        Returns:
            Number of generations advanced
        """
        advanced = 0
        self._setup_terminal()
        try:
            self.draw()
            next_tick = self.clock() + self.interval

            while self.max_generations is None or advanced < self.max_generations:
                timeout = max(0.0, next_tick - self.clock())
                if self._key_pressed(timeout):
                    key = self.stdin.read(1)
                    logger.debug("Quit on input %r after %d generations", key, advanced)
                    break

                now = self.clock()
                if now >= next_tick:
                    self.game.step()
                    advanced += 1
                    self.draw()
                    next_tick = now + self.interval

        except KeyboardInterrupt:
            logger.debug("Interrupted after %d generations", advanced)
        finally:
            self._restore_terminal()

        return advanced

    def draw(self) -> None:
        """Redraw the whole screen from the current game state."""
        self.stdout.write(CLEAR_SCREEN)
        self.stdout.write(self.game.view())
        self.stdout.flush()

    def _key_pressed(self, timeout: float) -> bool:
        readable, _, _ = select.select([self.stdin], [], [], timeout)
        return bool(readable)

    def _setup_terminal(self) -> None:
        if self.stdin.isatty():
            self._old_settings = termios.tcgetattr(self.stdin)
            tty.setcbreak(self.stdin.fileno())
        else:
            logger.debug("stdin is not a TTY, leaving input mode unchanged")

        self.stdout.write(CLEAR_SCREEN + HIDE_CURSOR)
        self.stdout.flush()

    def _restore_terminal(self) -> None:
        self.stdout.write(SHOW_CURSOR + RESET_ATTRIBUTES + "\n")
        self.stdout.flush()

        if self._old_settings is not None:
            termios.tcsetattr(self.stdin, termios.TCSADRAIN, self._old_settings)
            self._old_settings = None
