# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from functools import reduce

from .classify import Kind, kind_of, is_natural, to_key


__all__ = ["get", "get_in", "scan"]


def get(value, key):
    """Read value[key], or None if there is nothing there.

    Dict keys are looked up as strings, so get({"0": 1}, 0) gives 1.
    Never raises: missing dict keys, out of range or non-integer list
    indices all give None. Unlike plain indexing, reading from a
    primitive (including a str) or an atomic value also gives None,
    since those are never looked inside of.
    """
    kind = kind_of(value)
    if kind is Kind.DICT:
        return value.get(to_key(key))
    if kind is Kind.LIST:
        if is_natural(key) and key < len(value):
            return value[key]
    return None


def get_in(value, path):
    "Read the value found by following path from value."
    return reduce(get, path, value)


def scan(*args):
    """Fold get over all arguments, starting at the first.

    scan(value, 'a', 0, 'b') is the same as get_in(value, ['a', 0, 'b']).
    """
    if not args:
        return None
    return reduce(get, args[1:], args[0])
