from dataclasses import dataclass, field

from coleo import Option, tooled

from ..common import (
    CommonArguments,
    arguments as common_arguments,
    configured,
    expand_many,
    read_expressions,
)
from ..config import OutputOptions
from ..errors import HostexprError
from ..log import ErrorConsole, format_hosts


# fmt: off
@dataclass
class Arguments:
    common      : CommonArguments = field(default_factory=CommonArguments)
    format      : str = None
    separator   : str = None
    sort        : bool = False
# fmt: on


@tooled
def arguments():
    common = common_arguments()

    # Output format: lines, json or yaml
    format: Option & str = None

    # String printed between hosts with the lines format
    # [alias: -s]
    separator: Option & str = None

    # Sort the hosts instead of keeping the expression order
    sort: Option & bool = False

    return Arguments(common, format, separator, sort)


@tooled
def cli_expand(args=None):
    """Expand hostlist expressions into host names."""
    if args is None:
        args = arguments()

    with configured(args.common):
        output = OutputOptions()

        try:
            hosts = expand_many(read_expressions(args.common), args.common.max_size)
        except HostexprError as err:
            ErrorConsole().error(err)
            return 1

        if args.sort or output.sort:
            hosts = sorted(hosts)

        print(
            format_hosts(
                hosts,
                format=args.format or output.format,
                separator=output.separator if args.separator is None else args.separator,
            )
        )

    return 0
