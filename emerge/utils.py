# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import re
import sys

import colorama

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'


def read_json(filename):
    """Read a json document from filename.

    The null filename ("/dev/null" on *nix, "nul" on Windows)
    stands for an absent document and gives None.
    """
    if filename == EXPLICIT_MISSING_FILE:
        return None
    with io.open(filename, encoding='utf-8') as f:
        return json.load(f)


def write_json(obj, f, indent=None, sort_keys=False):
    """Write obj as json, followed by a newline, to filename or file-like f."""
    text = json.dumps(obj, indent=indent, sort_keys=sort_keys) + "\n"
    if hasattr(f, 'write'):
        f.write(text)
    else:
        with io.open(f, "w", encoding="utf8") as fo:
            fo.write(text)


r_is_index = re.compile(r"^(0|[1-9]\d*)$")

def parse_path(path):
    """Split a slash separated path into keys.

    Natural number segments become ints so that they can index lists:
    '/cells/0/source' gives ['cells', 0, 'source']. Dict lookups
    turn them back into strings.
    """
    return [int(p) if r_is_index.match(p) else p for p in path.split("/") if p]


def setup_std_streams():
    """Make sys.stdout/err escape unencodable characters instead of
    raising, and enable ANSI escapes on Windows."""
    if not os.getenv('PYTHONIOENCODING'):
        for name in ('stdout', 'stderr'):
            stream = getattr(sys, name)
            # Captured or redirected streams are left alone
            if stream is not getattr(sys, '__%s__' % name):
                continue
            if getattr(stream, 'errors', 'strict') == 'strict' and hasattr(stream, 'reconfigure'):
                stream.reconfigure(errors='backslashreplace')
    if sys.platform.startswith('win'):
        colorama.just_fix_windows_console()
