import json
import sys

import yaml
from blessed import Terminal

from .errors import ParseError

T = Terminal()


class ErrorConsole:
    """Render errors for humans, on stderr by default."""

    def __init__(self, file=None):
        self.file = file

    def _ensure_line(self, x):
        if not x.endswith("\n"):
            x += "\n"
        return x

    def sprint(self, *parts):
        return self._ensure_line(" ".join(map(str, parts)))

    def print(self, *parts):
        print(self.sprint(*parts), end="", file=self.file or sys.stderr)

    def error(self, err, source=None):
        header = T.bold_red(err.kind + ":")

        if source is not None:
            self.print(header, T.red(str(err)), T.gray(f"[in {source}]"))
        else:
            self.print(header, T.red(str(err)))

        if isinstance(err, ParseError):
            # Caret column is the display width of the text before the offset
            column = T.length(err.text[: err.offset].expandtabs())
            self.print(" ", err.text.expandtabs())
            self.print(" ", " " * column + T.bold_red("^"), T.gray(err.message))


def format_hosts(hosts, format="lines", separator="\n"):
    """Serialize a list of hosts for the command line."""
    if format == "lines":
        return separator.join(hosts)
    elif format == "json":
        return json.dumps(hosts, indent=4)
    elif format == "yaml":
        return yaml.dump(hosts, default_flow_style=False).rstrip("\n")
    else:
        raise ValueError(f"Unknown output format: {format}")
