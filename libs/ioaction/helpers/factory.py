"""Factory functions for building actions."""

from collections.abc import Iterable

from ioaction.action.actions import Action, ReadLine, Wrapped, WriteLine

# ReadLine carries no data, so one instance serves every program.
_READ_LINE = ReadLine()


def read_line() -> Action:
    """Return an action that reads one line from the input channel."""
    return _READ_LINE


def write_line(text: str) -> Action:
    """Return an action that writes `text` followed by a line terminator."""
    return WriteLine(text=text)


def wrap(text: str) -> Action:
    """Return an action whose result is `text`, with no interaction."""
    return Wrapped(text=text)


def sequence(actions: Iterable[Action]) -> Action:
    """Chain actions one after another, keeping only the last result.

    Args:
        actions: The actions to run, in order.

    Returns:
        A single action running all of them.

    Raises:
        ValueError: If `actions` is empty.
    """
    chained: Action | None = None
    for action in actions:
        chained = action if chained is None else chained.then(action)
    if chained is None:
        raise ValueError("sequence() needs at least one action")
    return chained
