# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for typedargs help and diagnostics."""
from rich.console import Console

from typedargs.themes import get_theme

console = Console(theme=get_theme())
