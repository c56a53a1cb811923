"""
interpreter.py

PURPOSE: Turn a player's typed command into a parsed value, or a clear error.
DEPENDENCIES: parser, observability

ARCHITECTURE NOTES:
The parser itself never raises; every node returns Output or ParseFailure.
CommandInterpreter is the boundary where a game (or the CLI) gets a plain
success value or a CommandError carrying the best failure to show the player.

By default text left over after the grammar matched is an error too, so
"mv 3 nw please" is rejected rather than silently truncated.
"""

import logging
from collections.abc import Sequence

from command_grammar.observability import get_tracer
from command_grammar.parser import (
    CommandHelp,
    Output,
    ParseFailure,
    Spec,
    documented_commands,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


class CommandError(Exception):
    """Raised when input does not match the command grammar."""

    def __init__(self, failure: ParseFailure, text: str):
        self.failure = failure
        self.text = text
        super().__init__(str(failure) or "invalid command")


class CommandInterpreter:
    """
    Parses player input against one grammar.

    Usage:
        interpreter = CommandInterpreter(grammar)
        output = interpreter.interpret("buy rai", ["Alice", "Bob"])
    """

    def __init__(self, grammar: Spec, allow_trailing: bool = False):
        """
        Args:
            grammar: Grammar for every command the game accepts
            allow_trailing: Accept input with unparsed text after the command
        """
        self.grammar = grammar
        self.allow_trailing = allow_trailing

    def interpret(
        self,
        text: str,
        player_names: Sequence[str] = (),
        allow_trailing: bool | None = None,
    ) -> Output:
        """
        Parse a full command.

        Args:
            text: Raw player input
            player_names: Current roster, for player name arguments
            allow_trailing: Override the interpreter's trailing text setting

        Returns:
            The grammar's Output

        Raises:
            CommandError: If the input does not match, or has trailing text
        """
        if allow_trailing is None:
            allow_trailing = self.allow_trailing

        with tracer.start_as_current_span("command_grammar.interpret") as span:
            span.set_attribute("input.length", len(text))
            result = self.grammar.parse(text, player_names)

            if isinstance(result, ParseFailure):
                logger.debug(f"Failed to parse {text!r} at offset {result.offset}: {result}")
                span.set_attribute("parse.success", False)
                span.set_attribute("parse.offset", result.offset)
                raise CommandError(result, text)

            if not allow_trailing and result.remaining.strip():
                offset = len(result.consumed) + len(result.remaining) - len(
                    result.remaining.lstrip()
                )
                failure = ParseFailure(
                    message=f"unexpected '{result.remaining.strip()}'",
                    offset=offset,
                )
                logger.debug(f"Trailing input after {result.consumed!r}: {result.remaining!r}")
                span.set_attribute("parse.success", False)
                span.set_attribute("parse.offset", offset)
                raise CommandError(failure, text)

            span.set_attribute("parse.success", True)
            return result

    def hints(self, player_names: Sequence[str] = ()) -> list[str]:
        """Descriptions of what a command may start with, for autocomplete."""
        return self.grammar.expected(player_names)

    def commands(self, player_names: Sequence[str] = ()) -> list[CommandHelp]:
        """Help entries for every documented command."""
        return documented_commands(self.grammar, player_names)
