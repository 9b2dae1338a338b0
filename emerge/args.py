# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse

from ._version import __version__
from .config import build_config
from .log import LEVELS, init_logging, set_log_level
from .utils import parse_path


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the config of the
    entry point named by its prog."""

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            self.set_defaults(**build_config(entrypoint))
        except ValueError:
            # Not a configurable entry point
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        init_logging(default or 'INFO')
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_log_level(values)


def apply_log_level(args):
    """Apply the resolved log level, which may come from config
    rather than the command line."""
    if getattr(args, 'log_level', None):
        set_log_level(args.log_level)


def add_generic_args(parser):
    """Adds a set of arguments common to all emerge commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_output_args(parser):
    """Adds arguments controlling how json output is written.
    """
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the result is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    parser.add_argument(
        '--indent',
        default=None,
        type=int,
        help="indentation of the json output.")
    parser.add_argument(
        '--sort-keys',
        dest='sort_keys',
        action=argparse.BooleanOptionalAction,
        default=False,
        help="sort the keys of dicts in the json output.")


def add_path_args(parser):
    """Adds the --path option addressing a location inside a document.
    """
    parser.add_argument(
        '-p', '--path',
        default=[],
        type=parse_path,
        help="slash separated path to the location to operate on, "
             "e.g. '/cells/0/source'. Integer segments index lists. "
             "Defaults to the document root.")


filename_help = {
    "document": "The json document filename.",
    "base":     "The base json document filename.",
    "updates":  "The json document filenames with updates, applied in order.",
    }


def add_filename_args(parser, names):
    """Add the positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        if name == 'updates':
            parser.add_argument(name, nargs='+', help=filename_help[name])
        else:
            parser.add_argument(name, help=filename_help[name])
