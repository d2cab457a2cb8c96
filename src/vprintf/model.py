"""
Core vprintf Model Objects

Defines the data structures the emitters work on:
    - Segments (literal text and placeholders)
    - Templates (a parsed format string)
    - Emissions (one recorded emitter call)
    - Scripts (an ordered list of emissions)

ARCHITECTURAL RULE:
    These objects:
        - Hold no state between emitter calls
        - Are immutable once parsed (templates, segments)
        - Are fully serializable (emissions, scripts)
        - Represent structure, not behavior
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .values import Kind, Value


class Syntax(Enum):
    """
    Placeholder syntax of a template.

    TYPED:   two-character markers %d, %s, %f (and %% for a literal percent)
    UNTYPED: a bare % is a placeholder for the next value of any kind
    """

    TYPED = "typed"
    UNTYPED = "untyped"


class Variant(Enum):
    """How an emission supplies its arguments."""

    CSTYLE = "cstyle"      # typed markers, variadic arguments
    PACK = "pack"          # bare markers, positional parameter pack
    SEQUENCE = "sequence"  # bare markers, homogeneous sequence

    @property
    def syntax(self) -> Syntax:
        return Syntax.TYPED if self is Variant.CSTYLE else Syntax.UNTYPED


class Segment(ABC):
    """Base class for the pieces a template is split into."""
    pass


@dataclass(frozen=True)
class Text(Segment):
    """
    Literal text copied to output unchanged.

    Properties:
        text: The characters to copy
    """

    text: str


@dataclass(frozen=True)
class Placeholder(Segment):
    """
    A substitution point consuming exactly one value.

    Properties:
        marker:
            The marker as written in the template ("%d", "%s", "%f" or "%")

        kind:
            Expected value kind, or None for the untyped marker

        offset:
            Character offset of the marker in the template source
    """

    marker: str
    kind: Optional[Kind] = None
    offset: int = 0


@dataclass(frozen=True)
class Template:
    """
    A parsed template.

    Built by ``vprintf.parser.parse_template``; segments are in template
    order and adjacent literal text is merged.

    INVARIANTS:
        - Joining the literal text and the markers of all segments gives
          back the source, except that "%%" is stored as a single "%".
          Unknown typed pairs such as "%x" and a trailing "%" are stored
          unchanged as literal text, so they join back as written.
        - Placeholders of an UNTYPED template never carry a kind
    """

    source: str
    syntax: Syntax
    segments: Tuple[Segment, ...] = ()

    @property
    def placeholders(self) -> List[Placeholder]:
        return [s for s in self.segments if isinstance(s, Placeholder)]

    @property
    def placeholder_count(self) -> int:
        return len(self.placeholders)

    @property
    def kinds(self) -> List[Optional[Kind]]:
        """Expected kinds in placeholder order (None for untyped)."""
        return [p.kind for p in self.placeholders]


@dataclass
class Emission:
    """
    One recorded emitter call.

    Properties:
        variant: Which emitter handles the call
        template: The template source string
        arguments: Argument values in order
    """

    variant: Variant
    template: str
    arguments: List[Value] = field(default_factory=list)


@dataclass
class Script:
    """
    A named, ordered list of emissions.

    Running a script emits each entry in order; nothing carries over from
    one entry to the next.
    """

    name: str
    emissions: List[Emission] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)

    def add(self, variant: Variant, template: str, *arguments: Value) -> Emission:
        """
        Append an emission and return it.

        Args:
            variant: Emitter variant
            template: Template source
            arguments: Tagged argument values
        """
        emission = Emission(variant=variant, template=template, arguments=list(arguments))
        self.emissions.append(emission)
        return emission
