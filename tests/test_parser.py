"""
Tests for the template parser (format string → Template).

Two syntaxes:
1. TYPED: %d, %s, %f placeholders, %% literal percent
2. UNTYPED: every bare % is a placeholder
"""

import pytest
from vprintf.model import Placeholder, Syntax, Template, Text
from vprintf.parser import FormatError, TemplateParseError, parse_template, split_first_marker
from vprintf.values import Kind


class TestTypedSyntax:
    """Test parsing of %d/%s/%f templates."""

    def test_no_placeholders(self):
        """Plain text is a single Text segment."""
        t = parse_template("hello world")
        assert t.segments == (Text("hello world"),)
        assert t.placeholder_count == 0

    def test_empty_template(self):
        t = parse_template("")
        assert t.segments == ()

    def test_kinds_in_order(self):
        t = parse_template("%s is from %d, version %f")
        assert t.kinds == [Kind.TEXT, Kind.INTEGER, Kind.FLOAT]

    def test_offsets(self):
        """Placeholders remember where they appear."""
        t = parse_template("a%db%s")
        assert [p.offset for p in t.placeholders] == [1, 4]

    def test_segments_structure(self):
        t = parse_template("C++%d.")
        assert t.segments == (
            Text("C++"),
            Placeholder("%d", Kind.INTEGER, 3),
            Text("."),
        )

    def test_double_percent_is_literal(self):
        """%% emits one % and consumes nothing."""
        t = parse_template("100%% sure")
        assert t.segments == (Text("100% sure"),)

    def test_double_percent_before_conversion(self):
        """%%d is a literal % followed by the letter d."""
        t = parse_template("%%d")
        assert t.segments == (Text("%d"),)

    def test_trailing_percent_is_literal(self):
        t = parse_template("50%")
        assert t.segments == (Text("50%"),)
        assert t.placeholder_count == 0

    def test_unknown_conversion_warns(self):
        """%x stays as text with a UserWarning."""
        with pytest.warns(UserWarning, match="Unknown conversion"):
            t = parse_template("value %x here")
        assert t.segments == (Text("value %x here"),)

    def test_newlines_preserved(self):
        t = parse_template("line %d\nnext\n")
        assert t.segments[-1] == Text("\nnext\n")

    def test_syntax_recorded(self):
        assert parse_template("%d").syntax is Syntax.TYPED


class TestUntypedSyntax:
    """Test parsing of bare % templates."""

    def test_every_percent_is_placeholder(self):
        t = parse_template("% mice, % cat", Syntax.UNTYPED)
        assert t.placeholder_count == 2
        assert t.kinds == [None, None]

    def test_conversion_letter_is_literal(self):
        """In untyped syntax %s is a placeholder followed by 's'."""
        t = parse_template("%s", Syntax.UNTYPED)
        assert t.segments == (Placeholder("%", None, 0), Text("s"))

    def test_trailing_percent_is_placeholder(self):
        t = parse_template("50%", "untyped")
        assert t.placeholder_count == 1

    def test_adjacent_markers(self):
        t = parse_template("%%", Syntax.UNTYPED)
        assert t.placeholder_count == 2


class TestParseErrors:

    def test_non_string_template(self):
        with pytest.raises(TemplateParseError):
            parse_template(42)

    def test_unknown_syntax(self):
        with pytest.raises(TemplateParseError):
            parse_template("x", "fancy")

    def test_parse_error_is_format_error(self):
        """Callers catching FormatError also see template errors."""
        assert issubclass(TemplateParseError, FormatError)
        with pytest.raises(FormatError):
            parse_template(None)


class TestTemplateObject:

    def test_template_immutable(self):
        t = parse_template("%d")
        with pytest.raises(AttributeError):
            t.source = "changed"

    def test_template_equality(self):
        """Parsing is deterministic."""
        assert parse_template("a %s b") == parse_template("a %s b")

    def test_is_template(self):
        assert isinstance(parse_template("x"), Template)

    def test_segments_join_back_to_source(self):
        """Unknown pairs and a trailing % are kept as written."""
        source = "a %x b %d%"
        with pytest.warns(UserWarning):
            t = parse_template(source)
        joined = "".join(s.text if isinstance(s, Text) else s.marker for s in t.segments)
        assert joined == source


class TestSplitFirstMarker:

    def test_split(self):
        assert split_first_marker("The % language") == ("The ", " language")

    def test_no_marker(self):
        assert split_first_marker("plain") == ("plain", None)

    def test_marker_at_end(self):
        assert split_first_marker("end%") == ("end", "")
