# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__


COMMANDS = ["get", "put", "patch", "merge"]
HELP_MESSAGE_VERBOSE = ("Usage: emerge [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, COMMANDS{%s}\n\n"
                       "Examples: emerge --version\n"
                       "          emerge get -h\n"
                       "          emerge get doc.json --path /a/0\n"
                       "          emerge merge base.json update.json -o out.json\n"
                       % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "get":
        from .showapp import main
    elif cmd == "put":
        from .updateapp import main_put as main
    elif cmd == "patch":
        from .updateapp import main_patch as main
    elif cmd == "merge":
        from .updateapp import main_merge as main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        sys.exit("Unrecognized command '%s'\n\n%s." %
                 (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m emerge <args>"
    sys.exit(main_dispatch())
