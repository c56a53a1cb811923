"""
conftest.py

Shared pytest fixtures for command_grammar tests.
"""

from pathlib import Path

import pytest

from command_grammar.parser import (
    Spec,
    chain,
    doc,
    enum,
    integer,
    literal,
    load_grammar,
    one_of,
    player,
    space,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"

DIRECTIONS = ("n", "ne", "e", "se", "s", "sw", "w", "nw")


@pytest.fixture
def sample_grammar_path() -> Path:
    """Path to the sample grammar JSON file."""
    return FIXTURES_DIR / "sample_grammar.json"


@pytest.fixture
def invalid_grammar_path() -> Path:
    """Path to a grammar file that fails validation."""
    return FIXTURES_DIR / "invalid_grammar.json"


@pytest.fixture
def sample_grammar(sample_grammar_path: Path) -> Spec:
    """Load and validate the sample grammar."""
    return load_grammar(sample_grammar_path)


@pytest.fixture
def built_grammar() -> Spec:
    """The sample grammar written with the builder functions."""
    return one_of(
        doc(
            "move",
            "Move units in a direction",
            chain(literal("mv"), space(), integer(min=1), space(), enum(*DIRECTIONS)),
        ),
        doc(
            "buy",
            "Buy a property",
            chain(literal("buy"), space(), enum("railroad", "utility", "park place")),
        ),
        doc(
            "give",
            "Give money to another player",
            chain(literal("give"), space(), player(), space(), integer(min=1)),
        ),
        doc("roll", "Roll the dice", literal("roll")),
    )


@pytest.fixture
def player_names() -> list[str]:
    """A three player roster."""
    return ["Alice", "Bob", "Carol"]
