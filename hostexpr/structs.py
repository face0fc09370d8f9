"""Parsed representation of a hostlist expression."""

from dataclasses import dataclass
from typing import Tuple, Union

from ovld import ovld

from .numbers import NumberToken


def format_number(value, padding, same_width=False):
    """Render ``value`` zero-padded.

    With ``same_width`` the number keeps ``padding`` extra zeros whatever its
    magnitude (``9`` -> ``09``, ``10`` -> ``010``). Otherwise the total width is
    ``padding + 1`` (``1`` -> ``01``, ``10`` -> ``10``).
    """
    digits = str(value)
    width = padding + len(digits) if same_width else padding + 1
    return digits.rjust(width, "0")


# fmt: off
@dataclass(frozen=True)
class Ascending:
    padding     : int
    same_width  : bool
    low         : int
    high        : int


@dataclass(frozen=True)
class Descending:
    padding     : int
    same_width  : bool
    low         : int
    high        : int


@dataclass(frozen=True)
class Disjoint:
    items: Tuple[NumberToken, ...]
# fmt: on


RangeFragment = Union[Ascending, Descending, Disjoint]


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class RangeGroup:
    fragments: Tuple[RangeFragment, ...]


Part = Union[Literal, RangeGroup]

HostlistEntry = Tuple[Part, ...]


###########
# iterate #
###########


@ovld
def iterate(fragment: Ascending):
    """Lazily yield the formatted values of a fragment, in expansion order."""
    for value in range(fragment.low, fragment.high + 1):
        yield format_number(value, fragment.padding, fragment.same_width)


@ovld  # noqa: F811
def iterate(fragment: Descending):
    for value in range(fragment.high, fragment.low - 1, -1):
        yield format_number(value, fragment.padding, fragment.same_width)


@ovld  # noqa: F811
def iterate(fragment: Disjoint):
    for item in fragment.items:
        yield format_number(item.value, item.zero_padding)


########
# size #
########


@ovld
def size(fragment: Ascending):
    """Number of values a fragment or group produces, without formatting them."""
    return fragment.high - fragment.low + 1


@ovld  # noqa: F811
def size(fragment: Descending):
    return fragment.high - fragment.low + 1


@ovld  # noqa: F811
def size(fragment: Disjoint):
    return len(fragment.items)


@ovld  # noqa: F811
def size(group: RangeGroup):
    return sum(size(fragment) for fragment in group.fragments)


def flatten(group: RangeGroup):
    """Format every value of a range group, fragments in written order."""
    return [value for fragment in group.fragments for value in iterate(fragment)]


###########
# to_dict #
###########


@ovld
def to_dict(fragment: Ascending):
    """Plain data view of the parsed model, used for YAML/JSON dumps."""
    return {
        "kind": "ascending",
        "padding": fragment.padding,
        "same_width": fragment.same_width,
        "low": fragment.low,
        "high": fragment.high,
    }


@ovld  # noqa: F811
def to_dict(fragment: Descending):
    return {
        "kind": "descending",
        "padding": fragment.padding,
        "same_width": fragment.same_width,
        "low": fragment.low,
        "high": fragment.high,
    }


@ovld  # noqa: F811
def to_dict(fragment: Disjoint):
    return {
        "kind": "disjoint",
        "items": [
            {"padding": item.zero_padding, "value": item.value}
            for item in fragment.items
        ],
    }


@ovld  # noqa: F811
def to_dict(part: Literal):
    return {"kind": "literal", "text": part.text}


@ovld  # noqa: F811
def to_dict(part: RangeGroup):
    return {"kind": "range", "fragments": [to_dict(f) for f in part.fragments]}
