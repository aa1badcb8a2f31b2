"""Action model — describes line-oriented I/O without performing it."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar


class ActionKind(StrEnum):
    """All action variants the evaluator understands."""

    READ_LINE = "read_line"
    WRITE_LINE = "write_line"
    WRAPPED = "wrapped"
    COMPOSITE = "composite"


class Action:
    """A pending interaction with the outside world.

    Building an Action never reads or writes anything. Only the evaluator
    performs the effect and produces the text result.
    """

    kind: ClassVar[ActionKind]

    def bind(self, continuation: "Continuation") -> "Composite":
        """Run this action, then feed its result into `continuation`."""
        return Composite(first=self, next=continuation)

    def then(self, action: "Action") -> "Composite":
        """Run this action, discard its result, then run `action`."""
        return self.bind(lambda _: action)

    def wrap(self, text: str) -> "Wrapped":
        """Return an action that produces `text` with no interaction."""
        return Wrapped(text=text)


Continuation = Callable[[str], Action]


@dataclass(frozen=True)
class ReadLine(Action):
    """Read one line from the input channel."""

    kind: ClassVar[ActionKind] = ActionKind.READ_LINE


@dataclass(frozen=True)
class WriteLine(Action):
    """Write `text` to the output channel; the result is empty."""

    kind: ClassVar[ActionKind] = ActionKind.WRITE_LINE

    text: str


@dataclass(frozen=True)
class Wrapped(Action):
    """Produce `text` as the result without touching any channel."""

    kind: ClassVar[ActionKind] = ActionKind.WRAPPED

    text: str


@dataclass(frozen=True)
class Composite(Action):
    """Run `first`, pass its result to `next`, then run the returned action."""

    kind: ClassVar[ActionKind] = ActionKind.COMPOSITE

    first: Action
    next: Continuation
