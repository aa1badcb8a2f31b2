"""Evaluator — the only place where actions touch the outside world."""

import logging

from ioaction.action.actions import Action, ActionKind, Composite, Continuation
from ioaction.models.transcript import EventKind, Transcript
from ioaction.runtime.console import Console

logger = logging.getLogger(__name__)


class Evaluator:
    """Performs actions against a Console.

    Composite chains are walked with an explicit stack of pending
    continuations, so chain length and loop count are bounded by memory,
    not by the interpreter's recursion limit.

    Usage:
        evaluator = Evaluator(Console())
        evaluator.perform(write_line("Enter your name").then(read_line()))
    """

    def __init__(
        self,
        console: Console | None = None,
        transcript: Transcript | None = None,
    ) -> None:
        self._console = console if console is not None else Console()
        self._transcript = transcript
        self._steps = 0

    @property
    def console(self) -> Console:
        return self._console

    @property
    def transcript(self) -> Transcript | None:
        return self._transcript

    @property
    def steps(self) -> int:
        """Number of primitive actions performed so far."""
        return self._steps

    def perform(self, action: Action) -> str:
        """Perform `action` and every action its continuations produce.

        Returns the text result of the last action in the chain. Failures
        of the input or output channel propagate unchanged.

        Raises:
            EOFError: If the input channel runs out while reading.
            TypeError: If `action`, or anything a continuation returns, is
                not an Action.
        """
        pending: list[Continuation] = []
        current = action

        while True:
            while isinstance(current, Composite):
                pending.append(current.next)
                current = current.first

            result = self._perform_primitive(current)
            if not pending:
                return result

            continuation = pending.pop()
            current = continuation(result)
            if not isinstance(current, Action):
                raise TypeError(
                    f"Continuation {continuation!r} returned "
                    f"{type(current).__name__}, expected an Action"
                )

    # --- Primitive execution ---

    def _perform_primitive(self, action: Action) -> str:
        """Perform a single non-composite action and return its result."""
        kind = getattr(action, "kind", None)

        if kind == ActionKind.READ_LINE:
            self._steps += 1
            line = self._console.read_line()
            logger.debug("[step %d] read %r", self._steps, line)
            if self._transcript is not None:
                self._transcript.record(EventKind.READ, line)
            return line

        elif kind == ActionKind.WRITE_LINE:
            self._steps += 1
            self._console.write_line(action.text)
            logger.debug("[step %d] wrote %r", self._steps, action.text)
            if self._transcript is not None:
                self._transcript.record(EventKind.WRITE, action.text)
            return ""

        elif kind == ActionKind.WRAPPED:
            self._steps += 1
            logger.debug("[step %d] wrapped %r", self._steps, action.text)
            return action.text

        raise TypeError(f"Cannot perform {action!r}: not a primitive action")


def perform(action: Action, console: Console | None = None) -> str:
    """Perform `action` on `console` (standard input/output by default)."""
    return Evaluator(console).perform(action)
