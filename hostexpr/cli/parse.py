from dataclasses import dataclass

import yaml
from coleo import Option, tooled

from ..errors import HostexprError
from ..grammar import parse
from ..log import ErrorConsole
from ..structs import to_dict


# fmt: off
@dataclass
class Arguments:
    expression: str
# fmt: on


@tooled
def arguments():
    # Hostlist expression to parse
    # [positional]
    expression: Option & str

    return Arguments(expression)


@tooled
def cli_parse(args=None):
    """Show how an expression is parsed, one list of parts per entry."""
    if args is None:
        args = arguments()

    try:
        entries = parse(args.expression)
    except HostexprError as err:
        ErrorConsole().error(err)
        return 1

    dump = [[to_dict(part) for part in entry] for entry in entries]
    print(yaml.dump(dump, sort_keys=False), end="")
    return 0
