# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help rendering for `ArgumentParser`.

`HelpFormatter` turns resolved argument metadata (name, type, cardinality,
help text, defaults, acceptance entries) into Rich renderables. The same
layout is used for two outputs:

- `format(console_width, left_width)` → plain text of a fixed width, suitable
  for logs, tests or embedding in another tool's output.
- `render(console, left_width)` → styled output on a Rich console.

Layout:

    Usage: shipyard [-s speed] [-c] class quantity

    Create new space ship(s)

    Positional arguments:
      class                 [string] Ship class
                            Range:
                              class: frigate,cruiser

    Optional arguments:
      -s speed (--speed)    [float] Ship speed (m/s)
                            Range:
                              speed: >0<299792458
                            Default:
                              speed = 1000.0

Line wrapping is left to Rich.
"""
from __future__ import annotations

from io import StringIO
from typing import Iterable

from rich.console import Console, Group, RenderableType
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from typedargs.parser.argument import Argument
from typedargs.parser.argument_action import ArgumentAction
from typedargs.themes import get_theme

INDENT = 2


class HelpFormatter:
    """Builds help output from a command name, description and its arguments."""

    def __init__(
        self,
        command: str,
        description: str,
        arguments: Iterable[Argument],
    ) -> None:
        self.command: str = command
        self.description: str = description
        self.arguments: list[Argument] = list(arguments)

    @property
    def positional(self) -> list[Argument]:
        return [argument for argument in self.arguments if argument.positional]

    @property
    def optional(self) -> list[Argument]:
        return [argument for argument in self.arguments if not argument.positional]

    def get_usage(self) -> str:
        """Return the one-line usage summary."""
        parts = [f"Usage: {self.command}".rstrip()]
        parts.extend(f"[{argument.get_usage_text()}]" for argument in self.optional)
        parts.extend(argument.name for argument in self.positional)
        return " ".join(parts)

    def _left_text(self, argument: Argument) -> Text:
        text = Text(argument.get_usage_text(), style="switch")
        if argument.alt_switches:
            text.append(f" ({', '.join(argument.alt_switches)})", style="switch")
        return text

    def _right_text(self, argument: Argument) -> Text:
        text = Text()
        text.append(argument.get_type_text(), style="type_tag")
        if argument.help:
            text.append(f" {argument.help}")
        if argument.action is ArgumentAction.STORE_TRUE:
            text.append(" (Default: FALSE)", style="default")
        elif argument.action is ArgumentAction.STORE_FALSE:
            text.append(" (Default: TRUE)", style="default")

        names = argument.get_value_names()
        accept_set = argument.accept_set
        if accept_set:
            text.append("\nRanges:" if argument.nargs > 1 else "\nRange:")
            for name, entry in zip(names, accept_set):
                text.append(f"\n  {name}: ")
                text.append(entry or "any", style="range")

        defaults = argument.defaults
        if defaults is not None and not argument.positional:
            text.append("\nDefault:")
            for name, default in zip(names, defaults):
                text.append(f"\n  {name} = ")
                text.append(str(default), style="default")
        return text

    def _section(self, title: str, arguments: list[Argument], left_width: int) -> Group:
        table = Table.grid(padding=(0, 1, 0, 0), expand=True)
        table.add_column(width=max(left_width - INDENT - 1, 1), overflow="fold")
        table.add_column(ratio=1, overflow="fold")
        for argument in arguments:
            table.add_row(self._left_text(argument), self._right_text(argument))
        return Group(
            Text(title, style="heading"),
            Padding(table, (0, 0, 0, INDENT)),
            Text(""),
        )

    def build(self, left_width: int = 24) -> Group:
        """Return the complete help as one Rich renderable."""
        renderables: list[RenderableType] = [
            Text(self.get_usage(), style="usage"),
            Text(""),
        ]
        if self.description:
            renderables.extend([Text(self.description), Text("")])
        if self.positional:
            renderables.append(
                self._section("Positional arguments:", self.positional, left_width)
            )
        if self.optional:
            renderables.append(
                self._section("Optional arguments:", self.optional, left_width)
            )
        return Group(*renderables)

    @staticmethod
    def _check_widths(console_width: int, left_width: int) -> None:
        if console_width <= 0 or left_width <= 0 or left_width >= console_width:
            raise ValueError(
                f"Invalid help widths: console_width={console_width}, "
                f"left_width={left_width} (need 0 < left_width < console_width)"
            )

    def format(self, console_width: int = 80, left_width: int = 24) -> str:
        """
        Render the help as plain text.

        Args:
            console_width (int): Total line width.
            left_width (int): Width of the switch column, including indentation.

        Raises:
            ValueError: If the widths are not 0 < left_width < console_width.
        """
        self._check_widths(console_width, left_width)
        plain = Console(
            width=console_width,
            file=StringIO(),
            color_system=None,
            theme=get_theme(),
            highlight=False,
        )
        with plain.capture() as capture:
            plain.print(self.build(left_width))
        return capture.get()

    def render(self, console: Console, left_width: int = 24) -> None:
        """Print the help on `console` with theme styles."""
        self._check_widths(console.width, left_width)
        console.print(self.build(left_width), highlight=False)
