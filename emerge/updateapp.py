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
from .updating import put, put_in, patch, patch_in, merge, merge_in
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_descriptions = {
    "put": "Replace a json document, or the value at a path inside it, "
           "with the contents of another document.",
    "patch": "Combine json documents one level deep: keys of the updates "
             "replace keys of the base document.",
    "merge": "Combine json documents at every depth: nested objects of the "
             "updates are merged into those of the base document.",
}


def _apply(operation, base, updates, path):
    if operation == "put":
        if path:
            return put_in(base, path, updates[0])
        return put(base, updates[0])

    combine, combine_in = {
        "patch": (patch, patch_in),
        "merge": (merge, merge_in),
    }[operation]
    if path:
        result = base
        for update in updates:
            result = combine_in(result, path, update)
        return result
    return combine(base, *updates)


def main_update(args):
    base_filename = args.base
    update_filenames = args.updates
    output_filename = args.output

    if args.operation == "put" and len(update_filenames) != 1:
        logger.error("put takes exactly one update document, got %d", len(update_filenames))
        return 1

    for fn in [base_filename] + update_filenames:
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            logger.error("Cannot find file '%s'", fn)
            return 1

    base = read_json(base_filename)
    updates = [read_json(fn) for fn in update_filenames]

    logger.debug("Applying %s of %d document(s) at path %r",
                 args.operation, len(updates), args.path)
    result = _apply(args.operation, base, updates, args.path)

    if result is base:
        logger.info("Result is unchanged from base document.")

    if output_filename:
        write_json(result, output_filename, indent=args.indent, sort_keys=args.sort_keys)
        logger.info("Result written to %s", output_filename)
    else:
        write_json(result, sys.stdout, indent=args.indent, sort_keys=args.sort_keys)
    return 0


def _build_arg_parser(operation):
    """Creates an argument parser for an update command."""
    parser = ConfigBackedParser(
        prog="emerge-%s" % operation,
        description=_descriptions[operation],
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "updates"])
    add_path_args(parser)
    add_output_args(parser)
    parser.set_defaults(operation=operation)
    return parser


def main(operation, args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser(operation).parse_args(args)
    apply_log_level(arguments)
    return main_update(arguments)


def main_put(args=None):
    return main("put", args)


def main_patch(args=None):
    return main("patch", args)


def main_merge(args=None):
    return main("merge", args)


if __name__ == "__main__":
    sys.exit(main_merge())
