"""Shared test fixtures."""

import io
from collections.abc import Callable

import pytest
from ioaction import Console, Evaluator, Transcript


class ScriptedConsole(Console):
    """A Console over in-memory streams with pre-typed input lines."""

    def __init__(self, lines: list[str] | None = None, line_terminator: str = "\n") -> None:
        text = "".join(line + "\n" for line in lines or [])
        super().__init__(
            stdin=io.StringIO(text),
            stdout=io.StringIO(),
            line_terminator=line_terminator,
        )

    @property
    def output(self) -> str:
        return self.stdout.getvalue()  # type: ignore[attr-defined]

    @property
    def output_lines(self) -> list[str]:
        return self.output.splitlines()


@pytest.fixture
def make_console() -> Callable[..., ScriptedConsole]:
    return ScriptedConsole


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def run(transcript: Transcript) -> Callable[..., tuple[str, ScriptedConsole]]:
    """Perform an action against scripted input; return (result, console)."""

    def _run(action, inputs: list[str] | None = None) -> tuple[str, ScriptedConsole]:
        console = ScriptedConsole(inputs)
        result = Evaluator(console, transcript=transcript).perform(action)
        return result, console

    return _run
