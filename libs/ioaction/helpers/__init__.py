from ioaction.helpers.factory import read_line, sequence, wrap, write_line
from ioaction.helpers.validation import validate_action

__all__ = [
    "read_line",
    "sequence",
    "validate_action",
    "wrap",
    "write_line",
]
