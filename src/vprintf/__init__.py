"""
vprintf Package

Naive re-implementations of a printf-style output function.

ARCHITECTURAL GUARANTEE:
------------------------
All emitters share one contract:
    - Literal text is copied unchanged, in order
    - Each placeholder consumes exactly one value, in order
    - A missing value or a wrong kind raises MismatchError

Emitters differ only in placeholder syntax (%d/%s/%f or a bare %)
and in how arguments are supplied (variadic, parameter pack, sequence).
"""

from vprintf.emitter import (
    ArgumentCountError,
    FormatError,
    KindMismatchError,
    MismatchError,
    cstyle_format,
    cstyle_printf,
    pack_format,
    pack_printf,
    sequence_format,
    sequence_printf,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "FormatError",
    "KindMismatchError",
    "MismatchError",
    "cstyle_format",
    "cstyle_printf",
    "pack_format",
    "pack_printf",
    "sequence_format",
    "sequence_printf",
]
