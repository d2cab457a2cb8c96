"""
Template Parser for vprintf (Layer 1: Format String → Template).

Splits a format string into literal text and placeholders in a single
left-to-right scan.

Syntax Notes:
    TYPED
        %d, %s, %f  → placeholder expecting INTEGER, TEXT, FLOAT
        %%          → literal "%"
        % at end    → literal "%"
        %x (other)  → literal "%x", with a UserWarning
    UNTYPED
        %           → placeholder for the next value, any kind
"""

import re
import warnings
from typing import List, Union

from vprintf.model import Placeholder, Segment, Syntax, Template, Text
from vprintf.values import kind_from_name


class FormatError(Exception):
    """Base class for vprintf errors."""
    pass


class TemplateParseError(FormatError):
    """Raised when a template cannot be parsed."""
    pass


_TYPED_PATTERN = re.compile(r'%[dsf]|%%|%.?|[^%]+', re.DOTALL)
_UNTYPED_PATTERN = re.compile(r'%|[^%]+', re.DOTALL)


def _merge_text(segments: List[Segment]) -> List[Segment]:
    """Collapse runs of adjacent Text segments into one."""
    merged: List[Segment] = []
    for seg in segments:
        if isinstance(seg, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].text + seg.text)
        else:
            merged.append(seg)
    return merged


def _scan_typed(source: str) -> List[Segment]:
    segments: List[Segment] = []
    for match in _TYPED_PATTERN.finditer(source):
        token = match.group(0)
        if not token.startswith('%'):
            segments.append(Text(token))
        elif token == '%%':
            segments.append(Text('%'))
        elif len(token) == 2 and token[1] in 'dsf':
            segments.append(Placeholder(token, kind_from_name(token[1]), match.start()))
        elif token == '%':
            # Only possible as the last character
            segments.append(Text(token))
        else:
            warnings.warn(
                f"Unknown conversion {token!r} at offset {match.start()} kept as text",
                UserWarning,
            )
            segments.append(Text(token))
    return segments


def _scan_untyped(source: str) -> List[Segment]:
    segments: List[Segment] = []
    for match in _UNTYPED_PATTERN.finditer(source):
        token = match.group(0)
        if token == '%':
            segments.append(Placeholder(token, None, match.start()))
        else:
            segments.append(Text(token))
    return segments


def parse_template(source: str, syntax: Union[Syntax, str] = Syntax.TYPED) -> Template:
    """
    Parse a format string into a Template.

    Args:
        source: The format string
        syntax: Syntax.TYPED or Syntax.UNTYPED (or their string values)

    Returns:
        Template with merged literal segments

    Raises:
        TemplateParseError: If source is not a string or syntax is unknown
    """
    if not isinstance(source, str):
        raise TemplateParseError(f"Template must be a string, got {type(source).__name__}")
    try:
        syntax = Syntax(syntax)
    except ValueError:
        raise TemplateParseError(f"Unknown template syntax: {syntax!r}")

    if syntax is Syntax.TYPED:
        segments = _scan_typed(source)
    else:
        segments = _scan_untyped(source)

    return Template(source=source, syntax=syntax, segments=tuple(_merge_text(segments)))


def split_first_marker(source: str) -> tuple:
    """
    Split an untyped template at its first "%".

    Returns:
        (prefix, rest) where rest is the text after the marker, or
        (source, None) when the template holds no marker.
    """
    index = source.find('%')
    if index < 0:
        return source, None
    return source[:index], source[index + 1:]


__all__ = [
    "parse_template",
    "split_first_marker",
    "FormatError",
    "TemplateParseError",
]
