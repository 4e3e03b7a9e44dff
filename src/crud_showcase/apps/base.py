"""Shared console plumbing for the five programs."""

from typing import Optional

from rich.console import Console


class ConsoleProgram:
    """Base class for a program that prints to a rich Console.

    Data lines go through ``write``, which disables markup, highlighting,
    emoji codes and wrapping so record text is printed exactly as built.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write(self, text: str = "") -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def rule(self, char: str = "=", width: int = 50) -> None:
        self.write(char * width)
