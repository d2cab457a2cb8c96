"""
Value System for vprintf

Every argument handed to an emitter is represented as a tagged variant
over three kinds: INTEGER, TEXT and FLOAT.

This replaces untyped variadic passing. The tag travels with the value,
so a typed placeholder can check what it receives instead of reinterpreting
raw memory.

ARCHITECTURAL RULE:
    Values are structure only.
    Rendering belongs in the emitter.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Kind(Enum):
    """
    Semantic type of an argument value.

    The enum value doubles as the conversion character of the typed
    placeholder that expects this kind.
    """

    INTEGER = "d"
    TEXT = "s"
    FLOAT = "f"


class Value(ABC):
    """
    Base class for all argument values.

    Subclasses are frozen dataclasses with a single ``value`` field
    and a class-level ``kind`` tag.
    """

    kind: Kind


@dataclass(frozen=True)
class IntegerValue(Value):
    """
    An integer argument.

    Examples:
        - 1985
        - -8
    """

    value: int
    kind = Kind.INTEGER


@dataclass(frozen=True)
class TextValue(Value):
    """
    A text argument.

    Examples:
        - "C++"
        - "" (empty text is still text)
    """

    value: str
    kind = Kind.TEXT


@dataclass(frozen=True)
class FloatValue(Value):
    """
    A floating-point argument.

    Examples:
        - 10.1
        - 2.0
    """

    value: float
    kind = Kind.FLOAT


_VALUE_TYPES = {
    Kind.INTEGER: IntegerValue,
    Kind.TEXT: TextValue,
    Kind.FLOAT: FloatValue,
}


def value_of(obj: Any) -> Value:
    """
    Wrap a native Python value in its tagged variant.

    Values that are already tagged pass through unchanged. ``bool`` is an
    ``int`` subclass and is treated as INTEGER.

    Raises:
        TypeError: If the object is not an int, str or float.
    """
    if isinstance(obj, Value):
        return obj
    if isinstance(obj, int):
        return IntegerValue(int(obj))
    if isinstance(obj, str):
        return TextValue(obj)
    if isinstance(obj, float):
        return FloatValue(obj)
    raise TypeError(f"Unsupported argument type: {type(obj).__name__}")


def make_value(kind: Union[Kind, str], raw: Any) -> Value:
    """
    Build a value of an explicit kind.

    ``kind`` may be a Kind or its name ("integer") or conversion character
    ("d"). The raw value is converted with the kind's Python type, so
    ``make_value("f", 2)`` gives ``FloatValue(2.0)``.

    Raises:
        ValueError: If the kind is unknown or the raw value does not convert.
    """
    if not isinstance(kind, Kind):
        kind = kind_from_name(kind)
    if kind is Kind.INTEGER:
        if isinstance(raw, float) and not raw.is_integer():
            raise ValueError(f"Not an integer: {raw!r}")
        return IntegerValue(int(raw))
    if kind is Kind.FLOAT:
        return FloatValue(float(raw))
    return _VALUE_TYPES[kind](str(raw))


def kind_from_name(name: str) -> Kind:
    """Look up a Kind by name ("float") or conversion character ("f")."""
    if not isinstance(name, str):
        raise ValueError(f"Unknown value kind: {name!r}")
    try:
        return Kind[name.upper()]
    except KeyError:
        pass
    try:
        return Kind(name)
    except ValueError:
        raise ValueError(f"Unknown value kind: {name!r}")
