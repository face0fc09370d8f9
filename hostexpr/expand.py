import itertools
import math

from ovld import ovld

from .config import ExpandOptions
from .errors import ExpansionTooLarge
from .grammar import parse
from .structs import HostlistEntry, Literal, RangeGroup, flatten, size


def unique(items):
    """Remove duplicates, keeping the first occurrence of each item in place."""
    return list(dict.fromkeys(items))


def entry_size(entry):
    """Number of hosts an entry expands to (duplicates included)."""
    return math.prod(size(part) for part in entry if isinstance(part, RangeGroup))


@ovld
def render(part: Literal, values):
    return part.text


@ovld  # noqa: F811
def render(part: RangeGroup, values):
    return next(values)


def expand_entry(entry: HostlistEntry):
    """Expand one entry into the list of hosts it denotes.

    The cartesian product runs over the entry's range groups, left to right,
    with the rightmost group varying fastest.
    """
    groups = [flatten(part) for part in entry if isinstance(part, RangeGroup)]

    if not groups:
        return ["".join(part.text for part in entry)]

    hosts = []
    for combination in itertools.product(*groups):
        values = iter(combination)
        hosts.append("".join(render(part, values) for part in entry))
    return hosts


def expand_many(texts, max_size=None, max_length=None):
    """Expand several expressions into one list of hosts.

    ``max_size`` bounds the total over every expression, duplicates included,
    and is checked before any host is generated. ``max_length`` applies to
    each expression on its own.
    """
    if max_size is None or max_length is None:
        options = ExpandOptions()
        max_size = options.max_size if max_size is None else max_size
        max_length = options.max_length if max_length is None else max_length

    entries = []
    for text in texts:
        if max_length is not None and len(text) > max_length:
            raise ExpansionTooLarge(len(text), max_length, what="characters")
        entries.extend(parse(text))

    if max_size is not None:
        total = 0
        for entry in entries:
            total += entry_size(entry)
            if total > max_size:
                raise ExpansionTooLarge(total, max_size)

    return unique(host for entry in entries for host in expand_entry(entry))


def expand(text, max_size=None, max_length=None):
    """Expand a hostlist expression.

    >>> expand("node[01-03,05].cluster,srv[1,2][3,4].local")[:4]
    ['node01.cluster', 'node02.cluster', 'node03.cluster', 'node05.cluster']

    Arguments:
        text: The expression.
        max_size: Refuse expressions that expand to more hosts than this.
            Defaults to the ``expand.max_size`` option (unbounded).
        max_length: Refuse expressions longer than this many characters.
            Defaults to the ``expand.max_length`` option (unbounded).

    Returns:
        The hosts, without duplicates, in the order they are first produced.

    Raises:
        ParseError: The expression is invalid.
        ExpansionTooLarge: One of the limits was exceeded.
    """
    return expand_many([text], max_size=max_size, max_length=max_length)
