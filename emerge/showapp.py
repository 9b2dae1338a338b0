# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_output_args, add_path_args,
    add_filename_args, apply_log_level,
)
from .log import logger
from .reading import get_in
from .utils import read_json, write_json, setup_std_streams


_description = "Print the value found at a path inside a json document."


def main_show(args):
    filename = args.document

    if not os.path.exists(filename):
        logger.error("Cannot find file '%s'", filename)
        return 1

    value = get_in(read_json(filename), args.path)
    if value is None:
        logger.info("Nothing found at path %r", args.path)

    out = args.output or sys.stdout
    write_json(value, out, indent=args.indent, sort_keys=args.sort_keys)
    return 0


def _build_arg_parser():
    """Creates an argument parser for the get command."""
    parser = ConfigBackedParser(
        prog="emerge-get",
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document"])
    add_path_args(parser)
    add_output_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    apply_log_level(arguments)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
