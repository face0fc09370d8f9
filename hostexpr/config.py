import contextvars
import os
import warnings
from contextlib import contextmanager
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from omegaconf import OmegaConf

from .merge import merge

config_global = contextvars.ContextVar("config", default=None)


_global_options = {}


def _track_options(name, type, default, value):
    """This is just a helper so command line can display the options"""
    _global_options[name] = {
        "type": type,
        "default": default,
        "value": value,
    }


def as_environment_variable(name):
    frags = name.split(".")
    return "HOSTEXPR_" + "_".join(map(str.upper, frags))


def boolean(value):
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
        raise ValueError(f"not a boolean: {value!r}")
    return bool(value)


def getenv(name, expected_type):
    value = os.getenv(name)

    if value is not None:
        try:
            return expected_type(value)
        except (TypeError, ValueError):
            warnings.warn(f"{name}={value} is not a valid {expected_type.__name__}, ignoring it")
            return None
    return value


#
#   Configuration files
#


def relative_to(pth, cwd):
    pth = Path(pth).expanduser()
    if not pth.is_absolute():
        pth = (Path(cwd) / pth).resolve()
    return pth


def _config_layers(config_files):
    for config_file in config_files:
        if isinstance(config_file, dict):
            yield config_file
        else:
            config_file = Path(config_file).absolute()
            config_base = config_file.parent
            with open(config_file, encoding="utf-8") as cf:
                config = yaml.safe_load(cf) or {}
                includes = config.pop("include", [])
                if isinstance(includes, str):
                    includes = [includes]
                yield from _config_layers(
                    relative_to(incl, config_base) for incl in includes
                )
                yield config


def load_config(*config_files):
    """Merge configuration layers, included files first.

    Each layer is either a path to a YAML file or a dictionary. ``${...}``
    interpolations are resolved once every layer is merged.
    """
    config = {}
    for layer in _config_layers(config_files):
        config = merge(config, layer)

    return OmegaConf.to_container(OmegaConf.create(config), resolve=True)


def default_config_files():
    config_file = os.getenv("HOSTEXPR_CONFIG")
    if config_file:
        return [config_file]
    return []


@contextmanager
def use_config(*config_files):
    """Make the merged configuration active for the duration of the block."""
    token = config_global.set(load_config(*config_files))
    try:
        yield config_global.get()
    finally:
        config_global.reset(token)


@contextmanager
def apply_config(options: dict):
    """Override options by dotted name, e.g. ``{"expand.max_size": 10}``."""
    config = deepcopy(config_global.get()) or {}

    for k, v in options.items():
        frags = k.split(".")

        lookup = config.setdefault("options", {})
        for f in frags[:-1]:
            lookup = lookup.setdefault(f, {})
        lookup[frags[-1]] = v

    token = config_global.set(config)
    try:
        yield config
    finally:
        config_global.reset(token)


#
#   Options
#


def select(*args):
    # This handles the case where 0 is right value and None is not
    for val in args:
        if val is not None:
            return val
    return None


def option(name, etype, default=None):
    """Resolve an option: environment, then active configuration, then default."""
    options = dict()
    config = config_global.get()
    if config:
        options = config.get("options", dict()) or dict()

    frags = name.split(".")
    env_value = getenv(as_environment_variable(name), etype)

    lookup = options
    for frag in frags[:-1]:
        lookup = lookup.get(frag, dict()) or dict()

    config_value = lookup.get(frags[-1], None)
    final_value = select(env_value, config_value, default)

    _track_options(name, etype, default, final_value)

    if final_value is None:
        return None
    return etype(final_value)


def defaultfield(name, type, default=None):
    return field(default_factory=lambda: option(name, type, default))


@dataclass
class ExpandOptions:
    # Maximum number of hosts an expression may expand to
    max_size: int = defaultfield("expand.max_size", int, None)

    # Maximum length of an expression, in characters
    max_length: int = defaultfield("expand.max_length", int, None)


@dataclass
class OutputOptions:
    # lines, json or yaml
    format: str = defaultfield("output.format", str, "lines")

    # Separator used by the lines format
    separator: str = defaultfield("output.separator", str, "\n")

    # Sort the hosts before printing them
    sort: bool = defaultfield("output.sort", boolean, False)


def all_options():
    """Instantiate every option group so that each option gets tracked."""
    return ExpandOptions(), OutputOptions()
