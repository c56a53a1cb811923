"""
grammar_io.py

PURPOSE: Load and save grammars as JSON.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
The `kind` discriminator on every node makes a grammar a plain JSON
document, e.g.

    {"kind": "sequence", "items": [
        {"kind": "literal", "token": "buy"},
        {"kind": "whitespace"},
        {"kind": "enumerated", "values": ["railroad", "utility"]}
    ]}

Structural problems surface as pydantic ValidationError, the same as any
other model in the package. Unreadable files and malformed JSON text raise
GrammarLoadError.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from command_grammar.parser.combinators import Spec

logger = logging.getLogger(__name__)

SPEC_ADAPTER: TypeAdapter[Spec] = TypeAdapter(Spec)


class GrammarLoadError(Exception):
    """Raised when a grammar file cannot be read or is not JSON."""


def grammar_from_json(text: str) -> Spec:
    """
    Build a grammar from JSON text.

    Raises:
        GrammarLoadError: If the text is not valid JSON
        ValidationError: If the JSON does not describe a grammar
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GrammarLoadError(f"Invalid JSON at line {e.lineno}: {e.msg}") from e
    return SPEC_ADAPTER.validate_python(data)


def grammar_to_json(spec: Spec, indent: int | None = 2) -> str:
    """Serialize a grammar to JSON text."""
    return SPEC_ADAPTER.dump_json(spec, indent=indent).decode()


def load_grammar(path: Path) -> Spec:
    """Load a grammar from a JSON file."""
    try:
        text = path.read_text()
    except OSError as e:
        raise GrammarLoadError(f"Cannot read grammar file {path}: {e}") from e

    try:
        spec = grammar_from_json(text)
    except ValidationError:
        logger.debug(f"Grammar file {path} failed validation")
        raise
    logger.debug(f"Loaded grammar from {path}")
    return spec


def dump_grammar(spec: Spec, path: Path) -> None:
    """Write a grammar to a JSON file."""
    path.write_text(grammar_to_json(spec))
