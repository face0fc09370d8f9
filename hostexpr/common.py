import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field

from coleo import Option, tooled

from .config import default_config_files, use_config
from .expand import expand_many


# fmt: off
@dataclass
class CommonArguments:
    expressions : list = field(default_factory=list)
    file        : str = None
    config      : str = None
    max_size    : int = None
# fmt: on


@tooled
def arguments():
    # Hostlist expressions; "-" reads them from the standard input
    # [positional: *]
    expressions: Option = []

    # File with one expression per line; "-" for the standard input
    # [alias: -f]
    file: Option & str = None

    # Configuration file, defaults to $HOSTEXPR_CONFIG
    config: Option & str = None

    # Maximum number of hosts all the expressions together may expand to
    max_size: Option & int = None

    return CommonArguments(expressions, file, config, max_size)


def _read_lines(stream):
    for line in stream:
        line = line.strip()
        if line and not line.startswith("#"):
            yield line


def read_expressions(args: CommonArguments):
    """Collect the expressions given on the command line and in files, in order."""
    expressions = []

    for expression in args.expressions:
        if expression == "-":
            expressions.extend(_read_lines(sys.stdin))
        else:
            expressions.append(expression)

    if args.file == "-":
        expressions.extend(_read_lines(sys.stdin))
    elif args.file is not None:
        with open(args.file, "r", encoding="utf-8") as fp:
            expressions.extend(_read_lines(fp))

    # Inside a Slurm allocation, default to the nodes of the job
    if not expressions and os.getenv("SLURM_JOB_NODELIST"):
        expressions.append(os.getenv("SLURM_JOB_NODELIST"))

    return expressions


@contextmanager
def configured(args: CommonArguments):
    config_files = [args.config] if args.config else default_config_files()

    with use_config(*config_files) as config:
        yield config
