from ioaction.models.transcript import EventKind, IOEvent, Transcript

__all__ = [
    "EventKind",
    "IOEvent",
    "Transcript",
]
