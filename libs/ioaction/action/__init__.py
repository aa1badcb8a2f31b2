"""Action values — composable descriptions of line-oriented I/O."""

from ioaction.action.actions import (
    Action,
    ActionKind,
    Composite,
    Continuation,
    ReadLine,
    Wrapped,
    WriteLine,
)

__all__ = [
    "Action",
    "ActionKind",
    "Composite",
    "Continuation",
    "ReadLine",
    "Wrapped",
    "WriteLine",
]
