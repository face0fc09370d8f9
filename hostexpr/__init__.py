"""Expand compressed hostname expressions such as ``node[01-03,05].cluster``."""

from .errors import (
    ExpansionTooLarge,
    HostexprError,
    HostlistSyntaxError,
    NumericOverflowError,
    PaddingError,
    ParseError,
)
from .expand import expand, expand_entry, expand_many, unique
from .grammar import parse
from .numbers import NumberToken
from .structs import (
    Ascending,
    Descending,
    Disjoint,
    Literal,
    RangeGroup,
    flatten,
    format_number,
)

__all__ = [
    "Ascending",
    "Descending",
    "Disjoint",
    "ExpansionTooLarge",
    "HostexprError",
    "HostlistSyntaxError",
    "Literal",
    "NumberToken",
    "NumericOverflowError",
    "PaddingError",
    "ParseError",
    "RangeGroup",
    "expand",
    "expand_entry",
    "expand_many",
    "flatten",
    "format_number",
    "parse",
    "unique",
]
