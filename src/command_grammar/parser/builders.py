"""
builders.py

PURPOSE: Short constructors for writing grammars by hand.
DEPENDENCIES: combinators, primitives

ARCHITECTURE NOTES:
Grammars read much better as nested calls than as keyword-heavy model
construction:

    doc("move", "Move units", chain(
        literal("mv"),
        after_space(integer(min=1)),
        after_space(enum("n", "ne", "e", "se", "s", "sw", "w", "nw")),
    ))
"""

from command_grammar.parser.combinators import (
    AlternationSpec,
    DocumentedSpec,
    OptionalSpec,
    PlayerNameSpec,
    RepetitionSpec,
    SequenceSpec,
    Spec,
)
from command_grammar.parser.primitives import (
    EnumeratedSpec,
    IntegerSpec,
    LiteralSpec,
    WhitespaceSpec,
)


def integer(min: int | None = None, max: int | None = None) -> IntegerSpec:  # noqa: A002
    return IntegerSpec(min=min, max=max)


def literal(token: str) -> LiteralSpec:
    return LiteralSpec(token=token)


def enum(*values: str, exact: bool = False) -> EnumeratedSpec:
    return EnumeratedSpec(values=values, exact=exact)


def one_of(*options: Spec) -> AlternationSpec:
    return AlternationSpec(options=options)


def chain(*items: Spec) -> SequenceSpec:
    return SequenceSpec(items=items)


def many(
    item: Spec,
    min: int | None = None,  # noqa: A002
    max: int | None = None,  # noqa: A002
    delimiter: str = "",
) -> RepetitionSpec:
    return RepetitionSpec(item=item, min=min, max=max, delimiter=delimiter)


def opt(inner: Spec) -> OptionalSpec:
    return OptionalSpec(inner=inner)


def doc(name: str, description: str, inner: Spec) -> DocumentedSpec:
    return DocumentedSpec(name=name, description=description, inner=inner)


def player() -> PlayerNameSpec:
    return PlayerNameSpec()


def space() -> WhitespaceSpec:
    return WhitespaceSpec()


def after_space(inner: Spec) -> SequenceSpec:
    """Require whitespace, then `inner`. The value is [spaces, inner value]."""
    return SequenceSpec(items=(WhitespaceSpec(), inner))
