"""Recursive descent parser for hostlist expressions.

Grammar::

    hostlists  := hostlist (',' hostlist)*
    hostlist   := (group | literal)+
    group      := '[' item (',' item)* ']'
    item       := number '-' number | number
    literal    := [A-Za-z0-9.-]+

Whitespace is allowed around items, around the dash of a range, before a group
or a literal, and around the top level commas.
"""

import re

from .errors import HostlistSyntaxError, PaddingError
from .numbers import NumberToken, parse_number
from .structs import Ascending, Descending, Disjoint, Literal, RangeGroup

_SPACES = re.compile(r"\s*")
_HOST = re.compile(r"[A-Za-z0-9.-]+")


def make_range(start: NumberToken, end: NumberToken, text, offset):
    """Build the fragment for ``start-end`` as written.

    The padding of the numerically smaller endpoint is kept; the larger endpoint
    may not claim more leading zeros than that (``9-0011`` is rejected).
    """
    same_width = start.zero_padding == end.zero_padding
    ascending = start.value <= end.value
    low, high = (start, end) if ascending else (end, start)

    if high.zero_padding > low.zero_padding:
        raise PaddingError("inconsistent end padding", text, offset)

    cls = Ascending if ascending else Descending
    return cls(low.zero_padding, same_width, low.value, high.value)


class Parser:
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def error(self, message):
        return HostlistSyntaxError(message, self.text, self.pos)

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def skip_spaces(self):
        self.pos = _SPACES.match(self.text, self.pos).end()

    def expect(self, char):
        if self.peek() != char:
            raise self.error(f"expected {char!r}")
        self.pos += 1

    def number(self):
        token, self.pos = parse_number(self.text, self.pos)
        return token

    #
    #   Range grammar
    #

    def range_form(self):
        """Try ``A-B`` at the current position.

        Returns None and rewinds when the item is not a range. Padding and
        overflow errors are not rewound.
        """
        start = self.pos
        try:
            first = self.number()
            self.skip_spaces()
            self.expect("-")
            self.skip_spaces()
            last = self.number()
        except HostlistSyntaxError:
            self.pos = start
            return None

        return make_range(first, last, self.text, start)

    def range_group(self):
        self.expect("[")

        fragments = []
        singles = []

        while True:
            self.skip_spaces()

            fragment = self.range_form()
            if fragment is None:
                singles.append(self.number())
            else:
                if singles:
                    fragments.append(Disjoint(tuple(singles)))
                    singles = []
                fragments.append(fragment)

            self.skip_spaces()
            char = self.peek()

            if char == ",":
                self.pos += 1
            elif char == "]":
                self.pos += 1
                break
            else:
                raise self.error("expected ',' or ']'")

        if singles:
            fragments.append(Disjoint(tuple(singles)))

        return RangeGroup(tuple(fragments))

    #
    #   Hostlist grammar
    #

    def at_entry_end(self):
        end = _SPACES.match(self.text, self.pos).end()
        return end == len(self.text) or self.text[end] == ","

    def hostlist(self):
        parts = []

        while not self.at_entry_end():
            self.skip_spaces()

            if self.peek() == "[":
                parts.append(self.range_group())
                continue

            m = _HOST.match(self.text, self.pos)
            if m is None:
                raise self.error("expected '[' or host character")

            parts.append(Literal(m.group(0)))
            self.pos = m.end()

        if not parts:
            self.skip_spaces()
            raise self.error("no host found")

        return tuple(parts)

    def hostlists(self):
        # The empty expression is a single empty host
        if self.text == "":
            return [(Literal(""),)]

        entries = [self.hostlist()]

        while True:
            self.skip_spaces()
            if self.peek() is None:
                break

            self.expect(",")
            entries.append(self.hostlist())

        return entries


def parse(text):
    """Parse a hostlist expression into a list of entries.

    Each entry is a tuple of ``Literal`` and ``RangeGroup`` parts.

    Raises:
        ParseError: The expression is invalid; ``offset`` tells where.
    """
    return Parser(text).hostlists()
