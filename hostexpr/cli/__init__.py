import sys

from coleo import run_cli

from .count import cli_count
from .env import cli_env
from .expand import cli_expand
from .parse import cli_parse


class Main:
    def expand():
        """Expand hostlist expressions into host names."""
        return cli_expand()

    def count():
        """Print the number of unique hosts the expressions expand to."""
        return cli_count()

    def parse():
        """Show how an expression is parsed."""
        return cli_parse()

    def env():
        """Print hostexpr environment variables"""
        return cli_env()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    argv = [str(x) for x in argv]
    try:
        sys.exit(run_cli(Main, argv=argv))
    except KeyboardInterrupt:
        pass
