"""
Load the word tables that drive tokenizing and pluralization.

The packaged `config.yaml` is read once on import. An optional user file with
the same layout is merged on top of it, and the result is frozen so that the
tables can be shared freely.
"""

# std
import os
from pathlib import Path
from collections import abc
from types import MappingProxyType

# third-party
import yaml
import more_itertools as mit
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'casework'
FILENAME = 'config.yaml'
SOURCE = Path(__file__).parent / FILENAME

# set this environment variable to ignore the user config file
SKIP_USER_CONFIG = 'CASEWORK_NO_USER_CONFIG'

CACHE = {}

# expected type of each table, by section
SCHEMA = {
    'words': {
        'separators':   str
    },
    'plurals': {
        'unchanging':   list,
        'irregular':    abc.Mapping,
        'fe_stems':     list
    }
}


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    with Path(filename).open('r', encoding='utf-8') as file:
        return yaml.safe_load(file) or {}


def load(filename):
    """Load a yaml config file. Results are cached per path."""
    path = Path(filename)
    if path not in CACHE:
        CACHE[path] = _load(path)

    return CACHE[path]


def _load(path):
    if path.exists():
        logger.debug("Loading config file: '{!s}'.", path)
        return load_yaml(path)

    raise FileNotFoundError(f"Non-existent file: '{path!s}'")


def user_config_file():
    return user_config_path(PACKAGE) / FILENAME


def load_config(source=SOURCE, user=None):
    """
    Load the package config, merging the user config file on top if present.

    Parameters
    ----------
    source : str or Path
        The base config file. By default the one shipped with the package.
    user : str or Path or bool, optional
        User config file to merge. If None (the default), look for one in the
        user config folder unless the `CASEWORK_NO_USER_CONFIG` environment
        variable is set. False skips the user config entirely.

    Returns
    -------
    MappingProxyType
        Read-only config with lists converted to frozensets.
    """

    config = validate(load(source), source)

    if user is None and not os.environ.get(SKIP_USER_CONFIG):
        user = user_config_file()

    if user and Path(user).exists():
        logger.info("Merging user config for {}: '{!s}'.", PACKAGE, user)
        config = merge(config, validate(load(user), user))

    return freeze(config)


def validate(config, filename):
    """
    Check that the document in `filename` is a mapping, and that the tables it
    contains have the types listed in `SCHEMA`. Tables may be omitted.

    Raises
    ------
    ValueError
        If the document or any of its sections or tables has the wrong type.
    """
    _check_type(config, abc.Mapping, 'Config', filename)

    for name, tables in SCHEMA.items():
        if name not in config:
            continue

        node = config[name]
        _check_type(node, abc.Mapping, f'Config section {name!r}', filename)

        for key, kind in tables.items():
            if key not in node:
                continue

            table = node[key]
            what = f'Config table {name}.{key}'
            _check_type(table, kind, what, filename)

            # words in the tables
            if isinstance(table, abc.Mapping):
                table = [*table.keys(), *table.values()]
            if isinstance(table, list):
                for word in table:
                    _check_type(word, str, f'Entry {word!r} of {what}',
                                filename)

    return config


def _check_type(obj, kind, what, filename):
    if not isinstance(obj, kind):
        raise ValueError(
            f"{what} in file '{filename!s}' should be of type "
            f'{kind.__name__!r}, not {type(obj).__name__!r}.'
        )


# Merge / Freeze
# ---------------------------------------------------------------------------- #

def merge(base, extra):
    """
    Recursively merge `extra` into a copy of `base`. Lists are extended with new
    items, mappings updated, and anything else replaced.
    """
    new = dict(base)
    for key, value in extra.items():
        old = new.get(key)
        if isinstance(old, abc.Mapping) and isinstance(value, abc.Mapping):
            new[key] = merge(old, value)
        elif isinstance(old, list) and isinstance(value, list):
            new[key] = list(mit.unique_everseen([*old, *value]))
        else:
            new[key] = value
    return new


def freeze(obj):
    if isinstance(obj, abc.Mapping):
        return MappingProxyType({key: freeze(val) for key, val in obj.items()})

    if isinstance(obj, (list, tuple, set)):
        return frozenset(obj)

    return obj


# ---------------------------------------------------------------------------- #

def section(name, config=None):
    """Get a named section of the config, checking that it is a mapping."""

    config = CONFIG if config is None else config
    if name not in config:
        raise ValueError(
            f'Config does not contain a section named {name!r}. The following '
            f'sections are available: {", ".join(map(repr, config))}.'
        )

    if not isinstance(node := config[name], abc.Mapping):
        raise ValueError(
            f'Config section {name!r} should be a mapping, not '
            f'{type(node).__name__!r}.'
        )

    return node


# ---------------------------------------------------------------------------- #
CONFIG = load_config()
