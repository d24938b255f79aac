"""Indented text accumulation and the printable-object protocol."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Printer:
    """Collects lines of text with a fixed number of spaces per indentation level."""

    def __init__(self, indent_width: int = 4) -> None:
        self.content = ""
        self.indent_width = indent_width
        self._indent_level = 0

    def dump(self, text: str) -> None:
        """Append a line at the current indentation, followed by a newline."""
        self.content += " " * (self._indent_level * self.indent_width) + text
        self.new_line()

    def show(self) -> None:
        """Write the collected content to standard output."""
        sys.stdout.write(self.content)
        sys.stdout.flush()

    def indent(self) -> None:
        self._indent_level += 1

    def unindent(self) -> None:
        self._indent_level -= 1

    def new_line(self) -> None:
        self.content += "\n"

    def reset(self) -> None:
        """Clear the collected content."""
        self.content = ""


def capitalize_word(word: str) -> str:
    """Upper-case the first character and lower-case the rest."""
    return word[:1].upper() + word[1:].lower()


def capitalize(text: str) -> str:
    """Capitalize every space-separated word of a string."""
    return " ".join(capitalize_word(word) for word in text.split(" "))


class Printable(ABC):
    """An object that can render itself into a Printer."""

    @abstractmethod
    def print_to(self, printer: Printer) -> None:
        """Render this object into the given printer."""

    def show(self) -> None:
        """Render this object and write it to standard output."""
        printer = Printer()
        self.print_to(printer)
        printer.show()