"""
Typedargs CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from typedargs.config import loader
from typedargs.console import console
from typedargs.exceptions import ArgumentError
from typedargs.parser import ArgumentParser
from typedargs.utils import setup_logging

HELP_SWITCHES = ("-h", "--help")


def find_config() -> Path | None:
    candidates = []
    if os.environ.get("TYPEDARGS_CONFIG"):
        candidates.append(Path(os.environ["TYPEDARGS_CONFIG"]))
    candidates.extend(
        [
            Path.cwd() / "typedargs.yaml",
            Path.cwd() / "typedargs.toml",
            Path.home() / ".config" / "typedargs" / "typedargs.yaml",
            Path.home() / ".config" / "typedargs" / "typedargs.toml",
        ]
    )
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    setup_logging(
        log_filename=os.environ.get("TYPEDARGS_LOG_FILE"),
        console_log_level=logging.WARNING,
    )
    return find_config()


def wants_help(parser: ArgumentParser, tokens: Sequence[str]) -> bool:
    """True for a lone -h/--help the declaration does not claim itself."""
    return (
        len(tokens) == 1
        and tokens[0] in HELP_SWITCHES
        and not parser.has_switch(tokens[0])
    )


def build_results_table(parser: ArgumentParser, results: dict[str, Any]) -> Table:
    table = Table(title=parser.command or None, title_style="heading")
    table.add_column("Destination", style="switch")
    table.add_column("Type", style="type_tag")
    table.add_column("Value")
    for dest, value in results.items():
        argument = parser[dest]
        shown = Text("-", style="muted") if value is None else Text(repr(value))
        table.add_row(Text(dest), Text(argument.get_type_text()), shown)
    return table


def main(argv: Sequence[str] | None = None) -> int:
    config_path = bootstrap()
    if not config_path:
        console.print(
            "[error]No typedargs declaration found.[/] Create typedargs.yaml or "
            "typedargs.toml, or point TYPEDARGS_CONFIG at one."
        )
        return 1

    try:
        parser = loader(config_path)
    except (ArgumentError, ValidationError, ValueError, yaml.YAMLError) as error:
        console.print(
            f"[error]Invalid declaration[/] {escape(str(config_path))}: {escape(str(error))}"
        )
        return 1

    tokens = list(sys.argv[1:] if argv is None else argv)
    if wants_help(parser, tokens):
        parser.render_help()
        return 0

    try:
        results = parser.parse(tokens)
    except ArgumentError as error:
        parser.render_help()
        console.print(f"[error]error:[/] {escape(str(error))}")
        return 2

    console.print(build_results_table(parser, results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
