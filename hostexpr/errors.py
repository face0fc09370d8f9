"""Exceptions raised while parsing and expanding hostlist expressions."""


class HostexprError(Exception):
    """Base class for every error caused by a bad expression."""


class ParseError(HostexprError):
    """The expression could not be parsed.

    Arguments:
        message: Short description of what was expected at ``offset``.
        text: The full expression that was being parsed.
        offset: Character index into ``text`` where parsing stopped.
    """

    kind = "parse error"

    def __init__(self, message, text, offset):
        self.message = message
        self.text = text
        self.offset = offset
        super().__init__(message, text, offset)

    @property
    def found(self):
        """The unexpected character, or None at the end of the input."""
        if self.offset < len(self.text):
            return self.text[self.offset]
        return None

    def __str__(self):
        found = self.found
        found = "end of input" if found is None else repr(found)
        return f"{self.message} at offset {self.offset} (found {found})"


class HostlistSyntaxError(ParseError):
    kind = "syntax error"


class PaddingError(ParseError):
    kind = "padding error"


class NumericOverflowError(ParseError):
    kind = "overflow error"


class ExpansionTooLarge(HostexprError):
    kind = "size error"

    def __init__(self, size, limit, what="hosts"):
        self.size = size
        self.limit = limit
        self.what = what
        super().__init__(size, limit, what)

    def __str__(self):
        if self.what == "characters":
            return f"expression is {self.size} characters long, limit is {self.limit}"
        return f"expression expands to at least {self.size} {self.what}, limit is {self.limit}"
