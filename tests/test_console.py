"""Unit tests for the Console line channels."""

import io

import pytest

from ioaction import Console


def _console(text: str = "", **kwargs) -> Console:
    return Console(stdin=io.StringIO(text), stdout=io.StringIO(), **kwargs)


class TestReadLine:
    def test_strips_lf(self):
        assert _console("hello\n").read_line() == "hello"

    def test_strips_crlf(self):
        assert _console("hello\r\n").read_line() == "hello"

    def test_strips_only_one_terminator(self):
        console = _console("a\n\nb\n")
        assert console.read_line() == "a"
        assert console.read_line() == ""
        assert console.read_line() == "b"

    def test_last_line_without_terminator(self):
        assert _console("tail").read_line() == "tail"

    def test_eof_raises(self):
        console = _console("only\n")
        console.read_line()
        with pytest.raises(EOFError):
            console.read_line()


class TestWriteLine:
    def test_appends_terminator(self):
        console = _console()
        console.write_line("one")
        console.write_line("two")
        assert console.stdout.getvalue() == "one\ntwo\n"  # type: ignore[attr-defined]

    def test_custom_terminator(self):
        console = _console(line_terminator="\r\n")
        console.write_line("one")
        assert console.stdout.getvalue() == "one\r\n"  # type: ignore[attr-defined]
        assert console.line_terminator == "\r\n"


class TestDefaultStreams:
    def test_resolves_standard_streams_lazily(self, capsys, monkeypatch):
        console = Console()
        monkeypatch.setattr("sys.stdin", io.StringIO("late\n"))
        assert console.read_line() == "late"
        console.write_line("out")
        assert capsys.readouterr().out == "out\n"
