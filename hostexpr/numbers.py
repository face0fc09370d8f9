import re
from dataclasses import dataclass

from .errors import HostlistSyntaxError, NumericOverflowError

U64_MAX = 2**64 - 1

_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class NumberToken:
    # Leading zeros of the digit run; an all-zero run counts one less
    zero_padding: int
    value: int


def leading_zeros(digits):
    zeros = len(digits) - len(digits.lstrip("0"))

    if zeros == len(digits):
        zeros -= 1

    return zeros


def parse_number(text, pos):
    """Parse the run of ASCII digits starting at ``pos``.

    Returns:
        A ``(NumberToken, end)`` tuple where ``end`` is the offset right after
        the last digit.
    """
    m = _DIGITS.match(text, pos)
    if m is None:
        raise HostlistSyntaxError("expected digit", text, pos)

    digits = m.group(0)
    significant = digits.lstrip("0")

    # Checked on the digit count first, int() refuses very long strings
    if len(significant) > len(str(U64_MAX)) or int(significant or "0") > U64_MAX:
        raise NumericOverflowError("number does not fit in 64 bits", text, pos)

    return NumberToken(leading_zeros(digits), int(significant or "0")), m.end()
