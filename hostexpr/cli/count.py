from coleo import tooled

from ..common import arguments, configured, expand_many, read_expressions
from ..errors import HostexprError
from ..log import ErrorConsole


@tooled
def cli_count(args=None):
    """Print the number of unique hosts the expressions expand to."""
    if args is None:
        args = arguments()

    with configured(args):
        try:
            hosts = expand_many(read_expressions(args), args.max_size)
        except HostexprError as err:
            ErrorConsole().error(err)
            return 1

    print(len(hosts))
    return 0
