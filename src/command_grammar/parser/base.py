"""
base.py

PURPOSE: Common base class for every grammar node.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
A grammar is a tree of frozen pydantic models. Each node is both a piece of
the grammar definition and its own parser: it knows how to parse a prefix of
some input and how to describe what it would have accepted.

Nodes are immutable once built, so one grammar can be shared by any number
of parse calls (and threads) without copying.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from command_grammar.parser.result import ParseResult


class SpecNode(BaseModel, ABC):
    """Base class for grammar nodes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def parse(self, text: str, player_names: Sequence[str] = ()) -> ParseResult:
        """
        Parse a prefix of `text`.

        Args:
            text: Input to parse, starting at the current cursor
            player_names: Current player roster (only used by player names)

        Returns:
            Output on success, ParseFailure otherwise
        """

    @abstractmethod
    def expected(self, player_names: Sequence[str] = ()) -> list[str]:
        """Describe the input this node would accept."""
