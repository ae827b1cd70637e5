import logging

import click

from sleeper.duration import format_remaining
from sleeper.errors import TerminalError

CLEAR_LINE = "\x1b[2K"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"

logger = logging.getLogger(__name__)


class TerminalRenderer:
    """Keeps the countdown on a single, rewritten terminal line.

    Output goes through click.echo, so the control sequences are dropped
    when stdout is not a terminal unless ``color`` forces them.
    """

    def __init__(self, stream=None, color=None):
        self._stream = stream
        self._color = color

    def _write(self, text: str, what: str):
        try:
            click.echo(text, file=self._stream, nl=False, color=self._color)
        except OSError as e:
            raise TerminalError(f"could not {what}: {e}") from e

    def begin(self):
        """Reserve the line the countdown overwrites and hide the cursor."""
        self._write("\n", "reserve the countdown line")
        self._write(HIDE_CURSOR, "hide the cursor")

    def update(self, remaining: int):
        line = format_remaining(remaining)
        logger.debug(f"Rendering: {line}")
        self._write(CLEAR_LINE, "clear terminal line")
        self._write("\r", "move cursor")
        self._write(line, "print the remaining duration")

    def end(self):
        self._write(SHOW_CURSOR, "show the cursor")
