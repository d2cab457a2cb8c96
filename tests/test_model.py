"""
Tests for vprintf model objects.

These tests verify:
    - Segments are immutable values
    - Template convenience properties
    - Variants map to their syntax
    - Scripts record emissions in order
"""

import pytest
from vprintf.model import Emission, Placeholder, Script, Syntax, Template, Text, Variant
from vprintf.values import IntegerValue, Kind, TextValue


class TestSegments:

    def test_text_immutable(self):
        seg = Text("abc")
        with pytest.raises(AttributeError):
            seg.text = "changed"

    def test_placeholder_defaults(self):
        """An untyped placeholder carries no kind."""
        p = Placeholder("%")
        assert p.kind is None
        assert p.offset == 0


class TestTemplate:

    def test_properties(self):
        t = Template(
            source="%s=%d",
            syntax=Syntax.TYPED,
            segments=(Placeholder("%s", Kind.TEXT, 0), Text("="), Placeholder("%d", Kind.INTEGER, 3)),
        )
        assert t.placeholder_count == 2
        assert t.kinds == [Kind.TEXT, Kind.INTEGER]
        assert [p.marker for p in t.placeholders] == ["%s", "%d"]

    def test_empty(self):
        t = Template(source="", syntax=Syntax.UNTYPED)
        assert t.placeholder_count == 0


class TestVariant:

    @pytest.mark.parametrize("variant,syntax", [
        (Variant.CSTYLE, Syntax.TYPED),
        (Variant.PACK, Syntax.UNTYPED),
        (Variant.SEQUENCE, Syntax.UNTYPED),
    ])
    def test_syntax(self, variant, syntax):
        assert variant.syntax is syntax


class TestScript:

    def test_add_keeps_order(self):
        script = Script(name="ordered")
        first = script.add(Variant.PACK, "% one", TextValue("a"))
        second = script.add(Variant.CSTYLE, "%d two", IntegerValue(2))
        assert script.emissions == [first, second]
        assert second.arguments == [IntegerValue(2)]

    def test_add_returns_emission(self):
        e = Script(name="s").add(Variant.SEQUENCE, "%")
        assert isinstance(e, Emission)
        assert e.arguments == []

    def test_independent_defaults(self):
        """Default lists are not shared between scripts."""
        a, b = Script(name="a"), Script(name="b")
        a.add(Variant.PACK, "x")
        assert b.emissions == []
