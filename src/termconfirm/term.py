"""Terminal handle used by the confirmation prompt.

Wraps a pair of text streams and exposes the small set of operations the
prompt needs: single keystroke reads, line reads, line clearing, cursor
visibility and flushing. Control sequences go through a rich Console bound
to the output stream.
"""

import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.control import Control, ControlType


class Term:
    """A terminal bound to an output stream and an input stream."""

    def __init__(self, output: TextIO, input: Optional[TextIO] = None):
        self._output = output
        self._input = input if input is not None else sys.stdin
        self._console = Console(file=output)

    @classmethod
    def stderr(cls) -> "Term":
        """Terminal writing to stderr, so stdout stays free for piped data."""
        return cls(sys.stderr)

    @classmethod
    def stdout(cls) -> "Term":
        """Terminal writing to stdout."""
        return cls(sys.stdout)

    def is_term(self) -> bool:
        """Check if the output stream is an interactive terminal."""
        return self._console.is_terminal

    def _reads_keyboard(self) -> bool:
        isatty = getattr(self._input, "isatty", None)
        return self._input is sys.stdin and bool(isatty and isatty())

    def read_char(self) -> str:
        """Read a single keystroke without echo.

        On an interactive stdin, Ctrl-C raises KeyboardInterrupt and Ctrl-D
        raises EOFError. Any other input stream is read one character at a
        time and raises EOFError once exhausted.
        """
        if self._reads_keyboard():
            return click.getchar(echo=False)

        char = self._input.read(1)
        if not char:
            raise EOFError("end of input while waiting for a keystroke")
        return char

    def read_line(self) -> str:
        """Read one line of buffered input, including its line terminator.

        Raises:
            EOFError: If the input stream is exhausted
        """
        line = self._input.readline()
        if not line:
            raise EOFError("end of input while waiting for a line")
        return line

    def write_str(self, text: str) -> None:
        self._output.write(text)

    def write_line(self, text: str) -> None:
        self._output.write(f"{text}\n")

    def clear_line(self) -> None:
        """Erase the current line and move the cursor to its start."""
        if self.is_term():
            self._console.control(
                Control((ControlType.CARRIAGE_RETURN,)),
                Control((ControlType.ERASE_IN_LINE, 2)),
            )

    def hide_cursor(self) -> None:
        self._console.show_cursor(False)

    def show_cursor(self) -> None:
        self._console.show_cursor(True)

    def flush(self) -> None:
        self._output.flush()
