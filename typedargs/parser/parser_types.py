# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Per-parse state models for the typedargs parsing engine.

Contents:
- `ParsePhase`: Scanning, Done or Failed.
- `ParseState`: Token cursor, filled positional count and the set of
  destinations already addressed by the current parse.

A fresh `ParseState` is created for every `ArgumentParser.parse()` call and
kept on the parser afterwards as `last_state` for inspection.
"""
from dataclasses import dataclass, field
from enum import Enum


class ParsePhase(Enum):
    SCANNING = "scanning"
    DONE = "done"
    FAILED = "failed"


@dataclass
class ParseState:
    """Tracks progress through one token list."""

    tokens: list[str]
    position: int = 0
    positional_filled: int = 0
    addressed: set[str] = field(default_factory=set)
    phase: ParsePhase = ParsePhase.SCANNING

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)

    @property
    def current(self) -> str:
        return self.tokens[self.position]

    @property
    def remaining(self) -> int:
        return len(self.tokens) - self.position

    def advance(self, count: int = 1) -> None:
        self.position += count

    def mark_addressed(self, dest: str) -> None:
        self.addressed.add(dest)
