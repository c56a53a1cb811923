"""
help.py

PURPOSE: Collect documented commands from a grammar for help screens.
DEPENDENCIES: combinators

ARCHITECTURE NOTES:
DocumentedSpec has no parsing behaviour of its own. This module is the one
place its name/description are read: a depth-first walk that lists every
documented node in the order the grammar declares them.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from command_grammar.parser.combinators import (
    AlternationSpec,
    DocumentedSpec,
    OptionalSpec,
    RepetitionSpec,
    SequenceSpec,
    Spec,
)


@dataclass(frozen=True)
class CommandHelp:
    """Help entry for one documented part of a grammar."""

    name: str
    description: str
    expected: list[str]


def children(spec: Spec) -> tuple[Spec, ...]:
    """Direct child nodes of a grammar node (empty for primitives)."""
    match spec:
        case AlternationSpec(options=options):
            return options
        case SequenceSpec(items=items):
            return items
        case RepetitionSpec(item=item) | OptionalSpec(inner=item) | DocumentedSpec(inner=item):
            return (item,)
        case _:
            return ()


def walk(spec: Spec) -> Iterator[Spec]:
    """Yield every node of the tree, parents before children."""
    yield spec
    for child in children(spec):
        yield from walk(child)


def documented_commands(spec: Spec, player_names: Sequence[str] = ()) -> list[CommandHelp]:
    """
    List every documented node in declaration order.

    Args:
        spec: Grammar to inspect
        player_names: Roster used to describe player name arguments

    Returns:
        One CommandHelp per DocumentedSpec, including nested ones
    """
    return [
        CommandHelp(
            name=node.name,
            description=node.description,
            expected=node.expected(player_names),
        )
        for node in walk(spec)
        if isinstance(node, DocumentedSpec)
    ]
