from ioaction.runtime.console import Console
from ioaction.runtime.evaluator import Evaluator, perform

__all__ = [
    "Console",
    "Evaluator",
    "perform",
]
