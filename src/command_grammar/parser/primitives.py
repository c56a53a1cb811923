"""
primitives.py

PURPOSE: Leaf parsers - integers, literal tokens, enumerated choices, whitespace.
DEPENDENCIES: pydantic, base, result

ARCHITECTURE NOTES:
Each primitive consumes a prefix of its input or fails with zero progress.
None of them skip leading whitespace; grammars ask for whitespace explicitly
(see WhitespaceSpec and builders.after_space).

Enumerated matching is what makes abbreviations work: "nw" for "northwest",
"rai" for "railroad". The scan rules are order sensitive and are kept as-is:
a candidate typed out in full beats any longer partial match that comes after
it, and several candidates sharing the best prefix length is an ambiguity.
"""

import logging
import re
from collections.abc import Sequence
from typing import Literal

from command_grammar.parser.base import SpecNode
from command_grammar.parser.formatting import and_list
from command_grammar.parser.result import Output, ParseFailure, ParseResult

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^-?[0-9]+")
WHITESPACE_PATTERN = re.compile(r"^\s+")

# Integers are limited to a signed 64 bit range; anything wider is a no-match
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class IntegerSpec(SpecNode):
    """
    An optionally negative whole number, with optional inclusive bounds.

    Examples:
        IntegerSpec() parses "42 gold" -> 42, remaining " gold"
        IntegerSpec(min=1, max=6) fails on "7" with "7 is too high"
    """

    kind: Literal["integer"] = "integer"
    min: int | None = None
    max: int | None = None

    def describe(self) -> str:
        """Describe the accepted range in words."""
        if self.min is not None and self.max is not None:
            return f"number between {self.min} and {self.max}"
        if self.min is not None:
            return f"number {self.min} or higher"
        if self.max is not None:
            return f"number {self.max} or lower"
        return "number"

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:  # noqa: ARG002
        return [self.describe()]

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        found = INTEGER_PATTERN.match(text)
        if found is None:
            return ParseFailure(expected=tuple(self.expected(player_names)))

        digits = found.group()
        value = int(digits)
        if not INT_MIN <= value <= INT_MAX:
            return ParseFailure(expected=tuple(self.expected(player_names)))

        if self.min is not None and value < self.min:
            return ParseFailure(
                message=f"{value} is too low",
                expected=tuple(self.expected(player_names)),
            )
        if self.max is not None and value > self.max:
            return ParseFailure(
                message=f"{value} is too high",
                expected=tuple(self.expected(player_names)),
            )

        return Output(value=value, consumed=digits, remaining=text[len(digits) :])


class LiteralSpec(SpecNode):
    """
    A fixed token, matched case-insensitively.

    The parsed value is the token as declared, not as typed.
    """

    kind: Literal["literal"] = "literal"
    token: str

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:  # noqa: ARG002
        return [self.token]

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        length = len(self.token)
        # Input shorter than the token is a plain no-match
        if len(text) >= length and text[:length].lower() == self.token.lower():
            return Output(value=self.token, consumed=text[:length], remaining=text[length:])
        return ParseFailure(expected=tuple(self.expected(player_names)))


def shared_prefix_length(text: str, candidate: str) -> int:
    """Count leading characters two strings share, ignoring case."""
    length = 0
    for text_char, candidate_char in zip(text, candidate, strict=False):
        if text_char.lower() != candidate_char.lower():
            break
        length += 1
    return length


class EnumeratedSpec(SpecNode):
    """
    One of a fixed set of words, accepting unambiguous abbreviations.

    With exact=True, only candidates typed out in full are considered.

    Examples (values=["north", "northeast"]):
        "nort" -> ambiguous, matched north and northeast
        "north" -> "north" (a full match beats the partial "northeast")
    """

    kind: Literal["enumerated"] = "enumerated"
    values: tuple[str, ...]
    exact: bool = False

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:  # noqa: ARG002
        return list(self.values)

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        matched: list[str] = []
        match_length = 0
        full_match = False

        for value in self.values:
            shared = shared_prefix_length(text, value)
            if self.exact and shared < len(value):
                continue
            if shared == 0 or shared < match_length:
                continue
            # After a full match, only other full matches stay in the running
            if full_match and shared != len(value):
                continue

            if shared == len(value):
                full_match = True
            if shared > match_length:
                matched = [value]
                match_length = shared
            else:
                matched.append(value)

        match len(matched):
            case 1:
                return Output(
                    value=matched[0],
                    consumed=text[:match_length],
                    remaining=text[match_length:],
                )
            case 0:
                return ParseFailure(expected=tuple(self.expected(player_names)))
            case _:
                logger.debug(f"Ambiguous input {text[:match_length]!r} matched {matched}")
                return ParseFailure(
                    message=(
                        f"matched {and_list(matched)}, "
                        "more input is required to uniquely match one"
                    ),
                    expected=tuple(self.expected(player_names)),
                )


class WhitespaceSpec(SpecNode):
    """One or more whitespace characters."""

    kind: Literal["whitespace"] = "whitespace"

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:  # noqa: ARG002
        return ["whitespace"]

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        found = WHITESPACE_PATTERN.match(text)
        if found is None:
            return ParseFailure(expected=tuple(self.expected(player_names)))
        spaces = found.group()
        return Output(value=spaces, consumed=spaces, remaining=text[len(spaces) :])
