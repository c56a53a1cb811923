"""
combinators.py

PURPOSE: Grammar nodes built from other nodes, and the Spec union of all nodes.
DEPENDENCIES: pydantic, base, primitives, result

ARCHITECTURE NOTES:
Spec is a closed, discriminated union over every node type (the `kind`
field). Combinators hold children typed as Spec, which makes the grammar
recursive and lets a whole tree round-trip through JSON.

Failure offsets:
- SequenceSpec shifts a failing step's offset by what earlier steps consumed
- AlternationSpec keeps only the failures with the largest offset, on the
  theory that the branch that got furthest is the one the user meant
- RepetitionSpec reports an unmet minimum at the end of what it consumed
- OptionalSpec swallows failures entirely
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Annotated, Literal

from pydantic import Field

from command_grammar.parser.base import SpecNode
from command_grammar.parser.formatting import or_list
from command_grammar.parser.primitives import (
    EnumeratedSpec,
    IntegerSpec,
    LiteralSpec,
    WhitespaceSpec,
)
from command_grammar.parser.result import Output, ParseFailure, ParseResult

logger = logging.getLogger(__name__)


class AlternationSpec(SpecNode):
    """Try each option in order; the first success wins."""

    kind: Literal["alternation"] = "alternation"
    options: tuple["Spec", ...]

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        expected: list[str] = []
        for option in self.options:
            expected.extend(option.expected(player_names))
        return expected

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        failures: list[ParseFailure] = []
        furthest = 0

        for option in self.options:
            result = option.parse(text, player_names)
            if isinstance(result, Output):
                return result
            if result.offset > furthest:
                failures = [result]
                furthest = result.offset
            elif result.offset == furthest:
                failures.append(result)

        if len(failures) < len(self.options):
            logger.debug(
                f"Kept {len(failures)} of {len(self.options)} failures at offset {furthest}"
            )

        messages = [f.message for f in failures if f.message]
        expected: list[str] = []
        for failure in failures:
            expected.extend(failure.expected)
        return ParseFailure(
            message=or_list(messages) or None,
            expected=tuple(expected),
            offset=furthest,
        )


class SequenceSpec(SpecNode):
    """Parse each item in turn; the value is the list of item values."""

    kind: Literal["sequence"] = "sequence"
    items: tuple["Spec", ...] = ()

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        if not self.items:
            return []
        return self.items[0].expected(player_names)

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        values = []
        consumed = 0
        remaining = text

        for item in self.items:
            result = item.parse(remaining, player_names)
            if isinstance(result, ParseFailure):
                return result.shifted(consumed)
            values.append(result.value)
            consumed += len(result.consumed)
            remaining = result.remaining

        return Output(value=values, consumed=text[:consumed], remaining=remaining)


class RepetitionSpec(SpecNode):
    """
    An item repeated, separated by a delimiter.

    Whitespace either side of the delimiter is allowed. An empty delimiter
    means items are separated by optional whitespace only.

    Examples:
        RepetitionSpec(item=IntegerSpec(), delimiter=",") parses "1, 2,3" -> [1, 2, 3]
    """

    kind: Literal["repetition"] = "repetition"
    item: "Spec"
    min: int | None = Field(default=None, ge=0)
    max: int | None = Field(default=None, ge=0)
    delimiter: str = ""

    def bound_phrase(self) -> str:
        if self.min is not None and self.max is not None:
            return f"between {self.min} and {self.max}"
        if self.min is not None:
            return f"{self.min} or more"
        if self.max is not None:
            return f"up to {self.max}"
        return "any number of"

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        phrase = self.bound_phrase()
        return [f"{phrase} {e}" for e in self.item.expected(player_names)]

    def separator(self) -> "SequenceSpec":
        """The delimiter with optional whitespace either side."""
        return SequenceSpec(
            items=(
                OptionalSpec(inner=WhitespaceSpec()),
                LiteralSpec(token=self.delimiter),
                OptionalSpec(inner=WhitespaceSpec()),
            )
        )

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        values: list = []
        if self.max is not None and (
            self.max == 0 or (self.min is not None and self.min > self.max)
        ):
            return Output(value=values, consumed="", remaining=text)

        separator = self.separator()
        offset = 0

        while True:
            item_offset = offset
            if values:
                delimited = separator.parse(text[offset:], player_names)
                if isinstance(delimited, ParseFailure):
                    break
                item_offset += len(delimited.consumed)

            result = self.item.parse(text[item_offset:], player_names)
            if isinstance(result, ParseFailure):
                break
            # A zero-width item after the first would repeat forever
            if values and item_offset + len(result.consumed) == offset:
                break

            values.append(result.value)
            offset = item_offset + len(result.consumed)

            if self.max is not None and len(values) == self.max:
                break

        if self.min is not None and len(values) < self.min:
            return ParseFailure(
                message=(
                    f"expected at least {self.min} items "
                    f"but could only parse {len(values)}"
                ),
                offset=offset,
            )

        return Output(value=values, consumed=text[:offset], remaining=text[offset:])


class OptionalSpec(SpecNode):
    """The inner node, or nothing. Never fails; the absent value is None."""

    kind: Literal["optional"] = "optional"
    inner: "Spec"

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        return [f"optional {e}" for e in self.inner.expected(player_names)]

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        result = self.inner.parse(text, player_names)
        if isinstance(result, ParseFailure):
            return Output(value=None, consumed="", remaining=text)
        return result


class DocumentedSpec(SpecNode):
    """
    Attach a name and description to part of a grammar.

    Parsing passes straight through; the annotation is only read when
    generating help (see help.documented_commands).
    """

    kind: Literal["documented"] = "documented"
    name: str
    description: str = ""
    inner: "Spec"

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        return self.inner.expected(player_names)

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        return self.inner.parse(text, player_names)


class PlayerNameSpec(SpecNode):
    """A player's name, abbreviations allowed; the value is the roster index."""

    kind: Literal["player_name"] = "player_name"

    def roster(self, player_names: Sequence[str]) -> EnumeratedSpec:
        return EnumeratedSpec(values=tuple(player_names))

    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        return self.roster(player_names).expected(player_names)

    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        result = self.roster(player_names).parse(text, player_names)
        if isinstance(result, ParseFailure):
            return result
        # The matched name came from the roster, so index() always finds it
        return replace(result, value=list(player_names).index(result.value))


Spec = Annotated[
    IntegerSpec
    | LiteralSpec
    | EnumeratedSpec
    | AlternationSpec
    | SequenceSpec
    | RepetitionSpec
    | OptionalSpec
    | DocumentedSpec
    | PlayerNameSpec
    | WhitespaceSpec,
    Field(discriminator="kind"),
]

for _model in (AlternationSpec, SequenceSpec, RepetitionSpec, OptionalSpec, DocumentedSpec):
    _model.model_rebuild()
del _model
