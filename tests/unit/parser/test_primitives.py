"""
TEST DOC: Primitive parsers

WHAT: Tests for integer, literal, enumerated and whitespace parsers
WHY: Every command grammar bottoms out in these
HOW: Parse representative inputs and check value/consumed/remaining or failure

CASES:
- Integers with and without bounds
- Case-insensitive literal tokens
- Enumerated abbreviations, full matches and ambiguity
- Leading whitespace

EDGE CASES:
- Input shorter than a literal token
- Integers too large for 64 bits
- Candidate order deciding full vs partial matches
- Exact mode rejecting abbreviations
"""

import pytest

from command_grammar.parser.primitives import (
    EnumeratedSpec,
    IntegerSpec,
    LiteralSpec,
    WhitespaceSpec,
    shared_prefix_length,
)
from command_grammar.parser.result import Output, ParseFailure


class TestInteger:
    """Tests for IntegerSpec."""

    def test_simple_number(self):
        """Digits at the start of input are parsed."""
        result = IntegerSpec().parse("42 gold")
        assert result == Output(value=42, consumed="42", remaining=" gold")

    def test_negative_number(self):
        """A leading minus sign is allowed."""
        result = IntegerSpec().parse("-7")
        assert isinstance(result, Output)
        assert result.value == -7
        assert result.consumed == "-7"

    def test_leading_zeros(self):
        """Leading zeros are consumed and ignored in the value."""
        result = IntegerSpec().parse("007")
        assert isinstance(result, Output)
        assert result.value == 7
        assert result.consumed == "007"

    @pytest.mark.parametrize("text", ["abc", " 5", "-", "", "-x"])
    def test_no_digits(self, text: str):
        """Input not starting with a number fails with no message."""
        result = IntegerSpec().parse(text)
        assert isinstance(result, ParseFailure)
        assert result.message is None
        assert result.expected == ("number",)
        assert result.offset == 0

    @pytest.mark.parametrize("value", [1, 3, 6])
    def test_within_bounds(self, value: int):
        """Values inside [min, max] succeed."""
        result = IntegerSpec(min=1, max=6).parse(str(value))
        assert isinstance(result, Output)
        assert result.value == value
        assert result.remaining == ""

    def test_too_high(self):
        """Values above max fail naming the value."""
        result = IntegerSpec(min=1, max=6).parse("7")
        assert isinstance(result, ParseFailure)
        assert result.message == "7 is too high"
        assert result.expected == ("number between 1 and 6",)
        assert result.offset == 0

    def test_too_low(self):
        """Values below min fail naming the value."""
        result = IntegerSpec(min=1).parse("0 units")
        assert isinstance(result, ParseFailure)
        assert result.message == "0 is too low"
        assert result.expected == ("number 1 or higher",)

    def test_negative_below_min(self):
        """Negative numbers are compared as numbers."""
        result = IntegerSpec(min=-5).parse("-6")
        assert isinstance(result, ParseFailure)
        assert result.message == "-6 is too low"

    @pytest.mark.parametrize(
        "minimum,maximum,description",
        [
            (None, None, "number"),
            (1, None, "number 1 or higher"),
            (None, 10, "number 10 or lower"),
            (1, 10, "number between 1 and 10"),
            (0, 0, "number between 0 and 0"),
        ],
    )
    def test_expected_describes_bounds(
        self, minimum: int | None, maximum: int | None, description: str
    ):
        """Expected description reflects the configured bounds."""
        spec = IntegerSpec(min=minimum, max=maximum)
        assert spec.expected() == [description]

    def test_largest_64_bit_value(self):
        """The largest signed 64 bit value is accepted."""
        result = IntegerSpec().parse("9223372036854775807")
        assert isinstance(result, Output)
        assert result.value == 2**63 - 1

    def test_overflow_is_no_match(self):
        """Numbers beyond 64 bits fail like a missing number."""
        result = IntegerSpec().parse("9223372036854775808")
        assert isinstance(result, ParseFailure)
        assert result.message is None
        assert result.expected == ("number",)


class TestLiteral:
    """Tests for LiteralSpec."""

    def test_case_insensitive_match(self):
        """The token matches regardless of case; the value is the declared token."""
        result = LiteralSpec(token="Move").parse("move north")
        assert result == Output(value="Move", consumed="move", remaining=" north")

    def test_exact_input(self):
        """Input equal to the token leaves nothing remaining."""
        result = LiteralSpec(token="roll").parse("ROLL")
        assert result == Output(value="roll", consumed="ROLL", remaining="")

    def test_prefix_of_longer_word(self):
        """Only the token's length is consumed."""
        result = LiteralSpec(token="go").parse("gold")
        assert isinstance(result, Output)
        assert result.remaining == "ld"

    @pytest.mark.parametrize("text", ["mo", "", "m"])
    def test_input_shorter_than_token(self, text: str):
        """Short input is an ordinary failure."""
        result = LiteralSpec(token="Move").parse(text)
        assert isinstance(result, ParseFailure)
        assert result.expected == ("Move",)
        assert result.offset == 0

    def test_mismatch(self):
        """Different text fails with the token as expected."""
        result = LiteralSpec(token="buy").parse("sell")
        assert isinstance(result, ParseFailure)
        assert result.message is None
        assert result.expected == ("buy",)


class TestSharedPrefix:
    """Tests for shared_prefix_length."""

    @pytest.mark.parametrize(
        "text,candidate,length",
        [
            ("HeLLo", "hello world", 5),
            ("abc", "xyz", 0),
            ("ab", "abc", 2),
            ("abc", "ab", 2),
            ("", "abc", 0),
        ],
    )
    def test_lengths(self, text: str, candidate: str, length: int):
        """Shared prefixes are counted case-insensitively."""
        assert shared_prefix_length(text, candidate) == length


class TestEnumerated:
    """Tests for EnumeratedSpec."""

    def test_ambiguous_abbreviation(self):
        """A prefix shared equally by two candidates is ambiguous."""
        spec = EnumeratedSpec(values=("north", "northeast"))
        result = spec.parse("nort")
        assert isinstance(result, ParseFailure)
        assert result.message == (
            "matched north and northeast, more input is required to uniquely match one"
        )
        assert result.expected == ("north", "northeast")
        assert result.offset == 0

    def test_three_way_ambiguity(self):
        """Every tied candidate is named."""
        spec = EnumeratedSpec(values=("sand", "salt", "sage"))
        result = spec.parse("sa")
        assert isinstance(result, ParseFailure)
        assert result.message == (
            "matched sand, salt, and sage, more input is required to uniquely match one"
        )

    def test_full_match_beats_partial(self):
        """A candidate typed in full wins over a longer candidate."""
        spec = EnumeratedSpec(values=("north", "northeast"))
        result = spec.parse("north")
        assert result == Output(value="north", consumed="north", remaining="")

    def test_full_match_followed_by_text(self):
        """Text after a full match is left remaining."""
        spec = EnumeratedSpec(values=("north", "northeast"))
        result = spec.parse("north 3")
        assert result == Output(value="north", consumed="north", remaining=" 3")

    def test_unique_longer_prefix(self):
        """A longer unique prefix selects the longer candidate."""
        spec = EnumeratedSpec(values=("northeast", "north"))
        result = spec.parse("northe")
        assert result == Output(value="northeast", consumed="northe", remaining="")

    def test_earlier_full_match_keeps_priority(self):
        """Once a full match is seen, later partial matches are ignored."""
        spec = EnumeratedSpec(values=("north", "northeast"))
        result = spec.parse("northe")
        assert result == Output(value="north", consumed="north", remaining="e")

    def test_longer_full_match_replaces_shorter(self):
        """A later, longer full match replaces an earlier full match."""
        spec = EnumeratedSpec(values=("ab", "abc"))
        result = spec.parse("abc")
        assert isinstance(result, Output)
        assert result.value == "abc"

    def test_abbreviation(self):
        """Unambiguous abbreviations match and consume only what was typed."""
        spec = EnumeratedSpec(values=("railroad", "utility", "park place"))
        result = spec.parse("rai")
        assert result == Output(value="railroad", consumed="rai", remaining="")

    def test_case_insensitive(self):
        """Matching ignores case but consumes the typed text."""
        spec = EnumeratedSpec(values=("n", "ne", "e"))
        result = spec.parse("NE")
        assert result == Output(value="ne", consumed="NE", remaining="")

    @pytest.mark.parametrize("text", ["x", "", " north"])
    def test_no_match(self, text: str):
        """Nothing in common fails listing every candidate."""
        spec = EnumeratedSpec(values=("north", "south"))
        result = spec.parse(text)
        assert isinstance(result, ParseFailure)
        assert result.message is None
        assert result.expected == ("north", "south")

    def test_exact_rejects_abbreviation(self):
        """Exact mode only accepts candidates typed in full."""
        spec = EnumeratedSpec(values=("railroad", "utility"), exact=True)
        assert isinstance(spec.parse("rail"), ParseFailure)

    def test_exact_accepts_full_word(self):
        """Exact mode still allows trailing text."""
        spec = EnumeratedSpec(values=("railroad", "utility"), exact=True)
        result = spec.parse("Railroad!")
        assert result == Output(value="railroad", consumed="Railroad", remaining="!")

    def test_expected_lists_values(self):
        """Expected is the candidate list in order."""
        spec = EnumeratedSpec(values=("b", "a"))
        assert spec.expected() == ["b", "a"]


class TestWhitespace:
    """Tests for WhitespaceSpec."""

    def test_leading_spaces(self):
        """All leading whitespace is consumed."""
        result = WhitespaceSpec().parse("  mv")
        assert result == Output(value="  ", consumed="  ", remaining="mv")

    def test_mixed_whitespace(self):
        """Tabs and newlines count as whitespace."""
        result = WhitespaceSpec().parse("\t\n x")
        assert isinstance(result, Output)
        assert result.remaining == "x"

    @pytest.mark.parametrize("text", ["mv", ""])
    def test_no_whitespace(self, text: str):
        """Missing whitespace fails with zero progress."""
        result = WhitespaceSpec().parse(text)
        assert result == ParseFailure(expected=("whitespace",))
