"""
game.py

PURPOSE: The interface a turn-based game exposes to a command session.
DEPENDENCIES: None (pure Python + typing)

ARCHITECTURE NOTES:
Games live outside this package. A game owns its grammar and state; it
parses each submitted command (usually with CommandInterpreter) and reports
what happened. These protocols pin down only that boundary. Rendering a view per player or
for spectators is optional and checked with isinstance.
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass
class CommandResponse:
    """What a game reports after accepting a command."""

    logs: list[str] = field(default_factory=list)
    can_undo: bool = False
    remaining: str = ""  # Unparsed input, for games that chain commands


@runtime_checkable
class Gamer(Protocol):
    """A playable turn-based game."""

    def start(self, players: int) -> list[str]: ...

    def command(
        self,
        player: int,
        text: str,
        player_names: list[str],
    ) -> CommandResponse: ...

    def is_finished(self) -> bool: ...

    def winners(self) -> list[int]: ...

    def whose_turn(self) -> list[int]: ...

    def render(self, player: int | None = None) -> str: ...


@runtime_checkable
class Eliminator(Protocol):
    """A game where players can be eliminated."""

    def eliminated(self) -> list[int]: ...


@runtime_checkable
class PlayerTemplater(Protocol):
    """A game that renders its own view for each player."""

    def player_template(self, player: int) -> str: ...


@runtime_checkable
class SpectatorTemplater(Protocol):
    """A game that renders a view for people not playing."""

    def spectator_template(self) -> str: ...
