"""Concrete collaborators for running the snippet command outside an editor."""

from .console import ConsoleMessenger, ConsoleOutput, ConsolePicker
from .echo import EchoBackend, NullOutput, RenderedEvaluation

__all__ = [
    "ConsoleMessenger",
    "ConsoleOutput",
    "ConsolePicker",
    "EchoBackend",
    "NullOutput",
    "RenderedEvaluation",
]
