#!/usr/bin/env python3
import io

import pytest

from sleeper.errors import TerminalError
from sleeper.terminal import CLEAR_LINE, HIDE_CURSOR, SHOW_CURSOR, TerminalRenderer
from testcase.base_test import BaseTest


class BrokenStream(io.StringIO):
    def write(self, text):
        raise OSError("terminal went away")


class TestTerminalRenderer(BaseTest):

    def setup_method(self):
        self.stream = io.StringIO()
        self.renderer = TerminalRenderer(stream=self.stream, color=True)

    def test_begin_reserves_line_and_hides_cursor(self):
        self.renderer.begin()
        assert self.stream.getvalue() == "\n" + HIDE_CURSOR

    def test_update_rewrites_single_line(self):
        self.renderer.update(61)
        self.renderer.update(60)
        output = self.stream.getvalue()
        self.logger.debug(f"Rendered output: {output!r}")
        assert output == (
            CLEAR_LINE + "\rSleeping after 0d 0h 1m 1s. Press Ctrl+c to cancel."
            + CLEAR_LINE + "\rSleeping after 0d 0h 1m 0s. Press Ctrl+c to cancel."
        )
        assert "\n" not in output

    def test_end_shows_cursor(self):
        self.renderer.end()
        assert self.stream.getvalue() == SHOW_CURSOR

    def test_escapes_stripped_without_terminal(self):
        renderer = TerminalRenderer(stream=self.stream)
        renderer.begin()
        renderer.update(3)
        assert "\x1b" not in self.stream.getvalue()
        assert "Sleeping after 0d 0h 0m 3s." in self.stream.getvalue()

    def test_write_failure_is_terminal_error(self):
        renderer = TerminalRenderer(stream=BrokenStream(), color=True)
        with pytest.raises(TerminalError, match="could not clear terminal line"):
            renderer.update(10)
