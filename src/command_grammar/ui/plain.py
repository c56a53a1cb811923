"""
plain.py

PURPOSE: Console output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module renders interpreter results using Rich:
- Parsed values as JSON
- Failures with a caret under the point where parsing stopped
- Documented command tables
- The player roster in player colors
"""

import json

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from command_grammar.colors import player_color
from command_grammar.parser import CommandHelp, Output, ParseFailure
from command_grammar.parser.formatting import or_list

# Global console instance
console = Console()


def print_message(text: str) -> None:
    """Print a normal message."""
    console.print(text)


def print_error(text: str) -> None:
    """Print an error message."""
    console.print(Text(text, style="red"))


def print_prompt() -> str:
    """Print the input prompt and get user input."""
    return console.input("[bold cyan]>[/bold cyan] ")


def print_output(output: Output) -> None:
    """Print a parsed value and what was left over."""
    console.print(json.dumps(output.value, default=str), markup=False, highlight=False)
    if output.remaining:
        console.print(Text(f"remaining: {output.remaining!r}", style="dim"))


def print_failure(text: str, failure: ParseFailure) -> None:
    """Print the input with a caret at the failure offset, then the reason."""
    console.print(Text(text), highlight=False)
    console.print(Text(" " * failure.offset + "^", style="bold red"))
    if failure.message:
        console.print(Text(failure.message, style="red"))
    if failure.expected:
        console.print(
            Text(f"expected {or_list(list(failure.expected))}", style="yellow"),
            highlight=False,
        )


def player_text(name: str, player: int) -> Text:
    """A player's name styled in their color."""
    return Text(name, style=Style(color=player_color(player), bold=True))


def print_players(names: list[str]) -> None:
    """Print the roster, each name in its player color."""
    line = Text("Players: ")
    line.append(Text(", ").join(player_text(name, i) for i, name in enumerate(names)))
    console.print(line)


def print_commands(commands: list[CommandHelp]) -> None:
    """Print a table of documented commands."""
    if not commands:
        print_message("No documented commands.")
        return

    table = Table(title="Commands", show_lines=False)
    table.add_column("Command", style="bold")
    table.add_column("Description")
    table.add_column("Starts with", style="dim")
    for command in commands:
        table.add_row(command.name, command.description, or_list(command.expected))
    console.print(table)


def print_debug(data: dict[str, object]) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    console.print(Text(json.dumps(data, indent=2, default=str), style="dim"))
    console.print("[dim]-------------[/dim]")
