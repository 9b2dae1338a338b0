# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Defaults for the command line applications.

Each application has a configurable class. Its defaults can be
overridden in emerge_config.json files, one section per class name:

    {"Output": {"indent": 2}, "Merge": {"sort_keys": true}}

A section applies to its class and to every subclass of it. Files are
searched for in the Jupyter config directories and the current
directory, the latter taking precedence.
"""

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Integer, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import LEVELS, logger


CONFIG_FILENAME = 'emerge_config.json'


class EmergeConfigurable(HasTraits):
    pass


class Global(EmergeConfigurable):

    log_level = Enum(
        LEVELS,
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Output(Global):

    indent = Integer(
        None,
        allow_none=True,
        help="Indentation of the json output. Compact output if unset.",
    ).tag(config=True)

    sort_keys = Bool(
        False,
        help="Whether to sort the keys of dicts in the json output.",
    ).tag(config=True)


class Put(Output):
    pass


class Patch(Output):
    pass


class Merge(Output):
    pass


class Show(Output):
    pass


entrypoint_configurables = {
    'emerge-put': Put,
    'emerge-patch': Patch,
    'emerge-merge': Merge,
    'emerge-get': Show,
}


def config_search_path():
    "Directories searched for config files, lowest priority first."
    return list(reversed(jupyter_config_path())) + [os.getcwd()]


def load_config_sections():
    """Read all config files into a single dict of sections.

    Later files override single values of earlier ones.
    """
    sections = {}
    for directory in config_search_path():
        loader = JSONFileConfigLoader(CONFIG_FILENAME, path=directory)
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            continue
        logger.debug("Loaded config file %s", loader.full_filename)
        for name, values in config.items():
            sections.setdefault(name, {}).update(values)
    return sections


def build_config(entrypoint):
    """Return the configured defaults for an entry point.

    Unset (None) values are left out, so that argparse keeps
    its own defaults for them.
    """
    try:
        cls = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    sections = load_config_sections()
    instance = cls()
    # Base classes first, so that sections of subclasses win
    for klass in reversed(cls.mro()):
        if not issubclass(klass, EmergeConfigurable):
            continue
        for name, value in sections.get(klass.__name__, {}).items():
            if not instance.has_trait(name):
                logger.warning("Ignoring unknown config option %s.%s", klass.__name__, name)
                continue
            # Validated by the trait, raising TraitError on bad values
            setattr(instance, name, value)

    config = {}
    for name in instance.trait_names(config=True):
        value = getattr(instance, name)
        if value is not None:
            config[name] = value
    return config
