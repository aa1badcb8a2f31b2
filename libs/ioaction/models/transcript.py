"""Transcript models — an ordered record of the I/O a run performed."""

from enum import StrEnum

from pydantic import BaseModel, Field


class EventKind(StrEnum):
    """Direction of a recorded interaction."""

    READ = "read"
    WRITE = "write"


class IOEvent(BaseModel):
    """One completed line of input or output."""

    step: int = Field(ge=1)
    kind: EventKind
    text: str


class Transcript(BaseModel):
    """Every read and write of an evaluation, in the order they happened.

    Serialize with `model_dump_json()`; load with `Transcript.model_validate_json()`.
    """

    events: list[IOEvent] = Field(default_factory=list)

    def record(self, kind: EventKind, text: str) -> IOEvent:
        """Append an event, numbering it after the last one."""
        event = IOEvent(step=len(self.events) + 1, kind=kind, text=text)
        self.events.append(event)
        return event

    def inputs(self) -> list[str]:
        """Return the lines read, in order."""
        return [e.text for e in self.events if e.kind == EventKind.READ]

    def outputs(self) -> list[str]:
        """Return the lines written, in order."""
        return [e.text for e in self.events if e.kind == EventKind.WRITE]
