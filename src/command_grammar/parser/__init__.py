"""Grammar nodes and parsing for typed player commands."""

from command_grammar.parser.builders import (
    after_space,
    chain,
    doc,
    enum,
    integer,
    literal,
    many,
    one_of,
    opt,
    player,
    space,
)
from command_grammar.parser.combinators import (
    AlternationSpec,
    DocumentedSpec,
    OptionalSpec,
    PlayerNameSpec,
    RepetitionSpec,
    SequenceSpec,
    Spec,
)
from command_grammar.parser.grammar_io import (
    GrammarLoadError,
    dump_grammar,
    grammar_from_json,
    grammar_to_json,
    load_grammar,
)
from command_grammar.parser.help import CommandHelp, documented_commands
from command_grammar.parser.primitives import (
    EnumeratedSpec,
    IntegerSpec,
    LiteralSpec,
    WhitespaceSpec,
)
from command_grammar.parser.result import Output, ParseFailure, ParseResult

__all__ = [
    "AlternationSpec",
    "CommandHelp",
    "DocumentedSpec",
    "EnumeratedSpec",
    "GrammarLoadError",
    "IntegerSpec",
    "LiteralSpec",
    "OptionalSpec",
    "Output",
    "ParseFailure",
    "ParseResult",
    "PlayerNameSpec",
    "RepetitionSpec",
    "SequenceSpec",
    "Spec",
    "WhitespaceSpec",
    "after_space",
    "chain",
    "doc",
    "documented_commands",
    "dump_grammar",
    "enum",
    "grammar_from_json",
    "grammar_to_json",
    "integer",
    "literal",
    "load_grammar",
    "many",
    "one_of",
    "opt",
    "player",
    "space",
]
