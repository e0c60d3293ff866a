"""Terminal implementations of the picker, messenger and output surface."""

from __future__ import annotations

import asyncio
import sys
from typing import Dict, List, Sequence, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from ..exception_handler import SelectionCancelled


class ConsolePicker:
    """Numbered menu answered through ``rich`` prompts.

    When ``save_as`` is given, the last choice made under that name is listed
    first on the next pick. An empty answer is an empty pick.
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        input_stream: TextIO | None = None,
    ) -> None:
        self.console = console or Console(stderr=True)
        self.input_stream = input_stream
        self.saved: Dict[str, str] = {}

    async def pick(
        self,
        values: Sequence[str],
        *,
        placeholder: str,
        save_as: str | None = None,
    ) -> str | None:
        ordered = self._ordered(values, save_as)
        try:
            choice = await asyncio.to_thread(self._ask, ordered, placeholder)
        except (EOFError, KeyboardInterrupt) as exc:
            raise SelectionCancelled() from exc

        if choice is not None and save_as:
            self.saved[save_as] = choice
        return choice

    def _ask(self, ordered: List[str], placeholder: str) -> str | None:
        for position, value in enumerate(ordered, start=1):
            self.console.print(f"  [bold cyan]{position}.[/bold cyan] {escape(value)}")
        numbers = [str(position) for position in range(1, len(ordered) + 1)]
        answer = Prompt.ask(
            f"[bold]{escape(placeholder)}[/bold]",
            console=self.console,
            choices=numbers + ordered,
            show_choices=False,
            default="",
            show_default=False,
            stream=self.input_stream,
        )
        if not answer:
            return None
        if answer in numbers:
            return ordered[int(answer) - 1]
        return answer

    def _ordered(self, values: Sequence[str], save_as: str | None) -> List[str]:
        ordered = list(values)
        previous = self.saved.get(save_as) if save_as else None
        if previous in ordered:
            ordered.remove(previous)
            ordered.insert(0, previous)
        return ordered


class ConsoleMessenger:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stderr

    def show_error(self, message: str) -> None:
        print(f"❌ {message}", file=self.stream)

    def show_info(self, message: str) -> None:
        print(f"; {message}", file=self.stream)


class ConsoleOutput:
    def __init__(self, prompt: str = "user=> ", stream: TextIO | None = None) -> None:
        self.prompt = prompt
        self.stream = stream or sys.stdout

    def append_prompt(self) -> None:
        print(self.prompt, file=self.stream)


__all__ = ["ConsoleMessenger", "ConsoleOutput", "ConsolePicker"]
