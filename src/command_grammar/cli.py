"""
cli.py

PURPOSE: Command-line interface for trying out command grammars.
DEPENDENCIES: typer, rich

ARCHITECTURE NOTES:
The CLI provides commands for:
- check: Parse one input against a grammar file
- describe: List the documented commands of a grammar
- repl: Type commands interactively against a grammar
- config: Show current settings
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from command_grammar import __version__
from command_grammar.config import get_settings
from command_grammar.interpreter import CommandError, CommandInterpreter
from command_grammar.observability import init_telemetry, shutdown_telemetry
from command_grammar.parser import GrammarLoadError, Spec, load_grammar
from command_grammar.ui import plain

app = typer.Typer(
    name="command-grammar",
    help="Parse abbreviated player commands against declarative grammars.",
    add_completion=False,
)

console = Console()

GrammarArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to the grammar JSON file",
        exists=True,
        readable=True,
        dir_okay=False,
    ),
]

PlayersOption = Annotated[
    list[str] | None,
    typer.Option(
        "--player",
        "-p",
        help="Player name, in roster order (repeatable)",
    ),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"command-grammar version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    _version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Command Grammar - parse abbreviated commands for turn-based games."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    init_telemetry(settings.otel)
    ctx.call_on_close(shutdown_telemetry)


def load_or_exit(grammar_file: Path) -> Spec:
    """Load a grammar, printing errors and exiting on failure."""
    try:
        return load_grammar(grammar_file)
    except GrammarLoadError as e:
        plain.print_error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        plain.print_error("Invalid grammar:")
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            plain.print_error(f"  {loc}: {error['msg']}")
        raise typer.Exit(1) from None


@app.command()
def check(
    grammar_file: GrammarArgument,
    text: Annotated[str, typer.Argument(help="Command text to parse")],
    players: PlayersOption = None,
    allow_trailing: Annotated[
        bool,
        typer.Option(
            "--allow-trailing",
            help="Accept unparsed text after the command",
        ),
    ] = False,
) -> None:
    """Parse one command and print the result."""
    settings = get_settings()
    grammar = load_or_exit(grammar_file)
    interpreter = CommandInterpreter(
        grammar, allow_trailing=allow_trailing or settings.allow_trailing
    )

    try:
        output = interpreter.interpret(text, players or [])
    except CommandError as e:
        plain.print_failure(text, e.failure)
        raise typer.Exit(1) from None

    plain.print_output(output)


@app.command()
def describe(
    grammar_file: GrammarArgument,
    players: PlayersOption = None,
) -> None:
    """List the documented commands in a grammar."""
    grammar = load_or_exit(grammar_file)
    interpreter = CommandInterpreter(grammar)
    names = players or []

    if names:
        plain.print_players(names)
        console.print()
    plain.print_commands(interpreter.commands(names))


@app.command()
def repl(
    grammar_file: GrammarArgument,
    players: PlayersOption = None,
) -> None:
    """Type commands interactively; 'help' lists commands, 'quit' exits."""
    settings = get_settings()
    grammar = load_or_exit(grammar_file)
    interpreter = CommandInterpreter(grammar, allow_trailing=settings.allow_trailing)
    names = players or []

    if names:
        plain.print_players(names)
        console.print()

    while True:
        try:
            user_input = plain.print_prompt()
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = user_input.strip().lower()
        if not command:
            continue
        if command in ("quit", "exit"):
            break
        if command in ("help", "?"):
            plain.print_commands(interpreter.commands(names))
            continue

        try:
            output = interpreter.interpret(user_input, names)
        except CommandError as e:
            plain.print_failure(user_input, e.failure)
            continue

        plain.print_output(output)
        if settings.debug:
            plain.print_debug({"consumed": output.consumed, "remaining": output.remaining})


@app.command("config")
def config_cmd() -> None:
    """Show current configuration."""
    settings = get_settings()
    console.print("[bold]Current Configuration:[/bold]")
    console.print(f"  Log level: {settings.log_level}")
    console.print(f"  Debug: {settings.debug}")
    console.print(f"  Allow trailing input: {settings.allow_trailing}")
    console.print()
    console.print("[bold]OpenTelemetry Settings:[/bold]")
    console.print(f"  Enabled: {settings.otel.enabled}")
    console.print(f"  Service name: {settings.otel.service_name}")


if __name__ == "__main__":
    app()
