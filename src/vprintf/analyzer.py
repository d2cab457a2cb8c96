"""
Template Analyzer: diagnostics for templates and argument lists.

Answers "what would this call do?" without emitting anything:
    - Placeholder inventory (count, kinds, offsets)
    - Literal text size
    - Argument list problems (missing values, kind mismatches, excess)

IMPORTANT: This is read-only. It never raises on a mismatch; it reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from vprintf.model import Syntax, Template, Text, Variant
from vprintf.parser import parse_template
from vprintf.values import Kind, value_of


@dataclass
class TemplateReport:
    """Analysis report for a single template."""

    source: str
    syntax: Syntax
    placeholder_count: int = 0
    literal_length: int = 0
    kinds: List[Optional[Kind]] = field(default_factory=list)
    offsets: List[int] = field(default_factory=list)
    kind_usage: Dict[str, int] = field(default_factory=dict)

    @property
    def signature(self) -> str:
        """
        Expected argument kinds as conversion characters.

        "%s from %d" gives "sd"; untyped placeholders show as "*".
        """
        return "".join(k.value if k is not None else "*" for k in self.kinds)


def _as_template(template: Union[str, Template], syntax: Union[Syntax, str]) -> Template:
    if isinstance(template, Template):
        return template
    return parse_template(template, syntax)


def analyze_template(template: Union[str, Template], syntax: Union[Syntax, str] = Syntax.TYPED) -> TemplateReport:
    """
    Inventory the placeholders of a template.

    Args:
        template: Template source or an already parsed Template
        syntax: Used only when ``template`` is a string
    """
    parsed = _as_template(template, syntax)
    report = TemplateReport(source=parsed.source, syntax=parsed.syntax)

    for segment in parsed.segments:
        if isinstance(segment, Text):
            report.literal_length += len(segment.text)
            continue
        report.placeholder_count += 1
        report.kinds.append(segment.kind)
        report.offsets.append(segment.offset)
        key = segment.kind.name.lower() if segment.kind is not None else "any"
        report.kind_usage[key] = report.kind_usage.get(key, 0) + 1

    return report


def check_arguments(
    template: Union[str, Template],
    args: Sequence[Any],
    syntax: Union[Syntax, Variant, str] = Syntax.TYPED,
) -> List[str]:
    """
    List the problems an emitter call with these arguments would hit.

    Missing values and kind mismatches are the ones an emitter raises for.
    Excess values are reported too, although emitters ignore them.

    Pass a Variant instead of a Syntax to check a specific emitter:
    Variant.SEQUENCE also requires every value to share one kind.

    Returns:
        Human-readable problem descriptions, empty when the call is clean
    """
    homogeneous = False
    if isinstance(syntax, Variant):
        homogeneous = syntax is Variant.SEQUENCE
        syntax = syntax.syntax

    parsed = _as_template(template, syntax)
    values = [value_of(a) for a in args]
    problems: List[str] = []

    if homogeneous and values:
        first = values[0].kind
        for index, value in enumerate(values):
            if value.kind is not first:
                problems.append(
                    f"Argument {index} is {value.kind.name.lower()}, "
                    f"argument 0 is {first.name.lower()}: sequence is not homogeneous"
                )

    placeholders = parsed.placeholders
    for index, placeholder in enumerate(placeholders):
        if index >= len(values):
            problems.append(
                f"Missing argument for {placeholder.marker!r} at offset {placeholder.offset}"
            )
            continue
        value = values[index]
        if placeholder.kind is not None and value.kind is not placeholder.kind:
            problems.append(
                f"Argument {index} is {value.kind.name.lower()}, "
                f"{placeholder.marker!r} at offset {placeholder.offset} expects "
                f"{placeholder.kind.name.lower()}"
            )

    if len(values) > len(placeholders):
        problems.append(f"{len(values) - len(placeholders)} excess argument(s) will be ignored")

    return problems
