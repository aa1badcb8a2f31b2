"""ioaction — pure descriptions of line-oriented I/O and their evaluator."""

from ioaction.action import (
    Action,
    ActionKind,
    Composite,
    Continuation,
    ReadLine,
    Wrapped,
    WriteLine,
)
from ioaction.config import RuntimeConfig
from ioaction.helpers.factory import read_line, sequence, wrap, write_line
from ioaction.helpers.validation import validate_action
from ioaction.models.transcript import EventKind, IOEvent, Transcript
from ioaction.runtime.console import Console
from ioaction.runtime.evaluator import Evaluator, perform

__all__ = [
    # Actions
    "Action",
    "ActionKind",
    "Composite",
    "Continuation",
    "ReadLine",
    "Wrapped",
    "WriteLine",
    # Runtime
    "Console",
    "Evaluator",
    "perform",
    # Models
    "EventKind",
    "IOEvent",
    "Transcript",
    # Config
    "RuntimeConfig",
    # Helpers
    "read_line",
    "sequence",
    "validate_action",
    "wrap",
    "write_line",
]
