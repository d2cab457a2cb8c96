"""
Format Emitter: substitute placeholders with argument values.

Three variants share one contract:
    - every literal character is copied unchanged, in order
    - every placeholder consumes exactly one value, in order, and emits
      that value's default textual representation

CSTYLE
    Typed markers (%d, %s, %f) consumed from ``*args`` by an index scan
    over the parsed template.
PACK
    Bare "%" markers consumed from ``*args`` by head/tail decomposition:
    emit up to the first marker, emit the head, continue with the rest of
    the template against the tail.
SEQUENCE
    Bare "%" markers consumed from a homogeneous sequence.

Mismatches raise MismatchError subclasses. Excess values are ignored.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Iterable, List, Optional, Sequence, TextIO

from vprintf.model import Emission, Placeholder, Script, Syntax, Template, Text, Variant
from vprintf.parser import FormatError, parse_template, split_first_marker
from vprintf.values import FloatValue, Kind, Value, value_of

logger = logging.getLogger(__name__)


class MismatchError(FormatError):
    """Placeholders and arguments do not line up."""
    pass


class ArgumentCountError(MismatchError):
    """A placeholder found no remaining argument."""
    pass


class KindMismatchError(MismatchError):
    """A value's kind does not match what the placeholder expects."""
    pass


def render_value(value: Value) -> str:
    """
    Default textual representation of a value.

    Integers in decimal, text verbatim, floats in general form with six
    significant digits (10.1 → "10.1", 2.0 → "2", 1e20 → "1e+20").
    """
    if isinstance(value, FloatValue):
        return format(value.value, "g")
    if value.kind is Kind.INTEGER:
        return str(int(value.value))
    return str(value.value)


def _coerce_all(args: Iterable[Any]) -> List[Value]:
    return [value_of(a) for a in args]


def _consume(values: Sequence[Value], cursor: int, placeholder: Placeholder) -> Value:
    if cursor >= len(values):
        raise ArgumentCountError(
            f"No argument left for placeholder {placeholder.marker!r} at offset "
            f"{placeholder.offset} (got {len(values)} argument(s))"
        )
    value = values[cursor]
    if placeholder.kind is not None and value.kind is not placeholder.kind:
        raise KindMismatchError(
            f"Placeholder {placeholder.marker!r} at offset {placeholder.offset} expects "
            f"{placeholder.kind.name.lower()}, got {value.kind.name.lower()} {value.value!r}"
        )
    return value


def format_template(template: Template, values: Sequence[Value]) -> str:
    """
    Emit a parsed template against tagged values.

    Single left-to-right scan with a cursor into ``values``.

    Raises:
        ArgumentCountError: If values run out before placeholders do
        KindMismatchError: If a typed placeholder receives another kind
    """
    out: List[str] = []
    cursor = 0
    for segment in template.segments:
        if isinstance(segment, Text):
            out.append(segment.text)
        else:
            out.append(render_value(_consume(values, cursor, segment)))
            cursor += 1
    if cursor < len(values):
        logger.debug("Ignoring %d excess argument(s)", len(values) - cursor)
    return "".join(out)


# =========================================================================
# CSTYLE: typed markers, variadic arguments
# =========================================================================

def cstyle_format(template: str, *args: Any) -> str:
    """
    Format with typed markers.

    Example:
        cstyle_format("C++%d since %f", 20, 10.1) == "C++20 since 10.1"
    """
    parsed = parse_template(template, Syntax.TYPED)
    return format_template(parsed, _coerce_all(args))


def cstyle_printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``cstyle_format(template, *args)`` to ``stream`` (default stdout)."""
    _write(cstyle_format(template, *args), stream)


# =========================================================================
# PACK: bare markers, head/tail decomposition
# =========================================================================

def pack_format(template: str, *args: Any) -> str:
    """
    Format with bare "%" markers from a positional parameter pack.

    The template suffix after each marker is processed against the
    remaining arguments. With no arguments left, the rest of the template
    is emitted verbatim.

    Raises:
        TemplateParseError: If the template is not a string
        ArgumentCountError: If the template holds more markers than arguments
    """
    parse_template(template, Syntax.UNTYPED)
    values = _coerce_all(args)
    out: List[str] = []
    rest: Optional[str] = template
    consumed = 0
    offset = 0

    while consumed < len(values):
        head = values[consumed]
        prefix, rest = split_first_marker(rest)
        out.append(prefix)
        if rest is None:
            # No marker left; remaining arguments are excess.
            logger.debug("Ignoring %d excess argument(s)", len(values) - consumed)
            return "".join(out)
        out.append(render_value(head))
        offset += len(prefix) + 1
        consumed += 1

    prefix, tail = split_first_marker(rest)
    if tail is not None:
        raise ArgumentCountError(
            f"No argument left for placeholder '%' at offset {offset + len(prefix)} "
            f"(got {len(values)} argument(s))"
        )
    out.append(rest)
    return "".join(out)


def pack_printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> None:
    """Write ``pack_format(template, *args)`` to ``stream`` (default stdout)."""
    _write(pack_format(template, *args), stream)


# =========================================================================
# SEQUENCE: bare markers, homogeneous sequence
# =========================================================================

def _check_homogeneous(values: Sequence[Value]) -> None:
    if not values:
        return
    first = values[0].kind
    for index, value in enumerate(values):
        if value.kind is not first:
            raise KindMismatchError(
                f"Sequence is not homogeneous: element {index} is "
                f"{value.kind.name.lower()}, element 0 is {first.name.lower()}"
            )


def sequence_format(template: str, values: Iterable[Any]) -> str:
    """
    Format with bare "%" markers from an ordered sequence of one kind.

    Accepts lists, tuples, ``array.array`` or any iterable.

    Example:
        sequence_format("% mice, % cat", [3, 1]) == "3 mice, 1 cat"

    Raises:
        TypeError: If values is a str or bytes object rather than a sequence
        KindMismatchError: If the elements are not all of one kind
        ArgumentCountError: If the sequence is shorter than the placeholders
    """
    if isinstance(values, (str, bytes)):
        raise TypeError(f"Expected a sequence of values, got {type(values).__name__}")
    tagged = _coerce_all(values)
    _check_homogeneous(tagged)
    parsed = parse_template(template, Syntax.UNTYPED)
    return format_template(parsed, tagged)


def sequence_printf(template: str, values: Iterable[Any], stream: Optional[TextIO] = None) -> None:
    """Write ``sequence_format(template, values)`` to ``stream`` (default stdout)."""
    _write(sequence_format(template, values), stream)


# =========================================================================
# Recorded emissions
# =========================================================================

def emit(emission: Emission) -> str:
    """Format a recorded emission with the emitter its variant names."""
    logger.debug(
        "Emitting %s template %r with %d argument(s)",
        emission.variant.value, emission.template, len(emission.arguments),
    )
    if emission.variant is Variant.CSTYLE:
        return cstyle_format(emission.template, *emission.arguments)
    if emission.variant is Variant.PACK:
        return pack_format(emission.template, *emission.arguments)
    if emission.variant is Variant.SEQUENCE:
        return sequence_format(emission.template, emission.arguments)
    raise ValueError(f"Unsupported emitter variant: {emission.variant!r}")


def run_script(script: Script, stream: Optional[TextIO] = None) -> int:
    """
    Emit every entry of a script in order.

    Each entry is formatted completely before anything is written, so a
    failing entry writes nothing. Entries before it stay written.

    Returns:
        Number of emissions written
    """
    logger.debug("Running script %r (%d emissions)", script.name, len(script.emissions))
    count = 0
    for emission in script.emissions:
        _write(emit(emission), stream)
        count += 1
    return count


def _write(text: str, stream: Optional[TextIO]) -> None:
    if stream is None:
        stream = sys.stdout
    stream.write(text)


__all__ = [
    "FormatError",
    "MismatchError",
    "ArgumentCountError",
    "KindMismatchError",
    "render_value",
    "format_template",
    "cstyle_format",
    "cstyle_printf",
    "pack_format",
    "pack_printf",
    "sequence_format",
    "sequence_printf",
    "emit",
    "run_script",
]
