"""Console — the line-oriented input and output channels."""

import logging
import sys
from typing import TextIO

logger = logging.getLogger(__name__)


class Console:
    """Reads and writes whole lines on a pair of text streams.

    Streams left as None resolve to `sys.stdin` / `sys.stdout` at the
    moment they are used, so the process-wide standard streams stay the
    default channel even when they are replaced after construction.

    Usage:
        console = Console(stdin=io.StringIO("Paul\\n"), stdout=io.StringIO())
        console.write_line("Enter your name")
        name = console.read_line()
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        line_terminator: str = "\n",
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._line_terminator = line_terminator

    @property
    def line_terminator(self) -> str:
        return self._line_terminator

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def read_line(self) -> str:
        """Read one line, without its trailing terminator.

        Raises:
            EOFError: If the input stream is exhausted.
        """
        line = self.stdin.readline()
        if line == "":
            logger.debug("Input channel exhausted")
            raise EOFError("End of input reached while reading a line")
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n"):
            return line[:-1]
        return line

    def write_line(self, text: str) -> None:
        """Write `text` followed by one line terminator and flush."""
        out = self.stdout
        out.write(text + self._line_terminator)
        out.flush()
