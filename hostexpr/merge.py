"""Utilities to merge configuration layers."""

from typing import Union

import yaml
from ovld import ovld


class Named:
    """A named object, used for sentinels."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name


# Use in a merge to indicate that a key should be deleted
DELETE = Named("DELETE")


###########
# cleanup #
###########


@ovld
def cleanup(value: object):
    """Remove DELETE markers left in a merged structure."""
    return value


@ovld  # noqa: F811
def cleanup(d: dict):
    return type(d)({k: cleanup(v) for k, v in d.items() if v is not DELETE})


@ovld  # noqa: F811
def cleanup(xs: Union[tuple, list]):
    return type(xs)(cleanup(x) for x in xs)


#########
# merge #
#########


@ovld
def merge(d1: dict, d2: dict):
    """Merge ``d2`` over ``d1``; ``d2`` wins on conflicts."""
    rval = type(d1)()
    for k, v in d1.items():
        if k in d2:
            v2 = d2[k]
            if v2 is not DELETE:
                rval[k] = merge(v, v2)
        else:
            rval[k] = v
    for k, v in d2.items():
        if k not in d1:
            rval[k] = cleanup(v)
    return rval


@ovld  # noqa: F811
def merge(l1: list, d: dict):
    if "append" in d:
        return l1 + d["append"]
    else:
        raise TypeError("Cannot merge list and dict unless dict has 'append' key")


@ovld  # noqa: F811
def merge(a: object, b: object):
    return cleanup(b)


yaml.SafeLoader.add_constructor("!delete", lambda loader, node: DELETE)
