# Typedargs CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Numeric range predicates used by acceptance sets.

A predicate is a concatenation of comparison terms, each an operator followed
by a numeric literal. Terms are AND-ed together:

    evaluate(15, ">10<=20")   → True   (15 > 10 and 15 <= 20)
    evaluate(-1.2, ">-2<-1")  → True
    evaluate(9, "!=9")        → False

Operators are matched longest first (`<=` before `<`), and a literal runs up to
the earliest operator that follows it. Malformed predicates raise
`PredicateSyntaxError`; they never evaluate to a silent match.

Comma separated alternatives are OR-ed, each one still an AND of its terms:

    evaluate(20, "==10,==20")      → True
    evaluate(25, ">0<10,>20<30")   → True
    evaluate(15, "==10,==20")      → False
"""
from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable

from typedargs.exceptions import PredicateSyntaxError

OPERATORS: tuple[str, ...] = ("==", "!=", "<=", ">=", "<", ">")

_COMPARATORS: dict[str, Callable[[float, float], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<=": operator.le,
    ">=": operator.ge,
    "<": operator.lt,
    ">": operator.gt,
}

_NUMERIC_PATTERN = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def is_numeric(text: str) -> bool:
    """
    Return True if `text` is a plain decimal literal.

    Accepts an optional leading '-', digits and at most one '.', with at least
    one digit. Scientific notation is not recognized.

    Examples:
        is_numeric("-12")  → True
        is_numeric(".025") → True
        is_numeric("1-2")  → False
        is_numeric("3.1.4") → False
    """
    return _NUMERIC_PATTERN.fullmatch(text) is not None


@dataclass(frozen=True)
class Comparison:
    """A single `<op><literal>` term of a predicate."""

    operator: str
    literal: str

    @property
    def operand(self) -> float:
        return float(self.literal)

    def test(self, value: float) -> bool:
        return _COMPARATORS[self.operator](value, self.operand)

    def __str__(self) -> str:
        return f"{self.operator}{self.literal}"


def _match_operator(predicate: str, position: int) -> str | None:
    for candidate in OPERATORS:
        if predicate.startswith(candidate, position):
            return candidate
    return None


def _next_operator_offset(predicate: str, start: int) -> int:
    offsets = [predicate.find(candidate, start) for candidate in OPERATORS]
    found = [offset for offset in offsets if offset != -1]
    return min(found) if found else len(predicate)


@lru_cache(maxsize=256)
def parse_predicate(predicate: str) -> tuple[Comparison, ...]:
    """
    Split a predicate string into its comparison terms.

    Args:
        predicate (str): A string such as ">0<299792458".

    Returns:
        tuple[Comparison, ...]: The terms in source order. Empty for "".

    Raises:
        PredicateSyntaxError: If a term does not start with an operator,
            an operator has no operand, or an operand is not numeric.
    """
    comparisons: list[Comparison] = []
    position = 0
    while position < len(predicate):
        found = _match_operator(predicate, position)
        if found is None:
            raise PredicateSyntaxError(
                predicate,
                position,
                f"expected one of {', '.join(OPERATORS)}",
            )
        literal_start = position + len(found)
        literal_end = _next_operator_offset(predicate, literal_start)
        literal = predicate[literal_start:literal_end]
        if not literal:
            raise PredicateSyntaxError(
                predicate, literal_start, f"operator '{found}' has no operand"
            )
        if not is_numeric(literal):
            raise PredicateSyntaxError(
                predicate, literal_start, f"{literal!r} is not a number"
            )
        comparisons.append(Comparison(operator=found, literal=literal))
        position = literal_end
    return tuple(comparisons)


def parse_alternatives(predicate: str) -> tuple[tuple[Comparison, ...], ...]:
    """
    Split a comma separated predicate into its alternatives, each parsed.

    Raises:
        PredicateSyntaxError: If an alternative is empty or malformed.
    """
    clauses = predicate.split(",")
    if len(clauses) == 1:
        return (parse_predicate(predicate),)
    alternatives: list[tuple[Comparison, ...]] = []
    offset = 0
    for clause in clauses:
        if not clause:
            raise PredicateSyntaxError(predicate, offset, "empty alternative")
        alternatives.append(parse_predicate(clause))
        offset += len(clause) + 1
    return tuple(alternatives)


def evaluate(value: int | float, predicate: str) -> bool:
    """
    Test `value` against `predicate`.

    True if any comma separated alternative holds, where an alternative holds
    when every one of its terms does. The whole predicate is parsed before
    any term is evaluated, so a malformed tail is reported even when an
    earlier term already decides the result.

    Raises:
        PredicateSyntaxError: If the predicate is malformed.
    """
    alternatives = parse_alternatives(predicate)
    return any(
        all(comparison.test(value) for comparison in comparisons)
        for comparisons in alternatives
    )
