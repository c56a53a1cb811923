"""
result.py

PURPOSE: Output and failure values threaded through every parser.
DEPENDENCIES: formatting

ARCHITECTURE NOTES:
Parsers never raise for bad input. They return either an Output (value plus
the consumed/remaining split of their input) or a ParseFailure.

ParseFailure.offset is how far into the parser's own input the failure
happened. Sequences shift it by what earlier steps consumed, so an enclosing
alternation can compare failures from different branches and keep the one
that got furthest.
"""

from dataclasses import dataclass, replace
from typing import Any

from command_grammar.parser.formatting import or_list


@dataclass(frozen=True)
class Output:
    """A successful parse step."""

    value: Any
    consumed: str
    remaining: str

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """
    A failed parse step.

    Attributes:
        message: Human readable reason, if there is more to say than expected
        expected: Descriptions of input that would have been accepted
        offset: Characters into the attempted input where parsing failed
    """

    message: str | None = None
    expected: tuple[str, ...] = ()
    offset: int = 0

    @property
    def success(self) -> bool:
        return False

    def shifted(self, by: int) -> "ParseFailure":
        """Return a copy with the offset moved forward by `by` characters."""
        return replace(self, offset=self.offset + by)

    def __str__(self) -> str:
        parts = []
        if self.message:
            parts.append(self.message)
        if self.expected:
            parts.append(f"expected {or_list(list(self.expected))}")
        return ", ".join(parts)


ParseResult = Output | ParseFailure
