# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Update operators: put, patch, merge and their path variants.

All operators try to preserve references: whenever (part of) the
result is equal by value to the corresponding part of the previous
value, the previous object is returned instead of a new one. When
new dicts are built, keys with None values are omitted.

The combining functions tend to speculatively build a copy, compare
it shallowly to the previous value and throw it away if nothing
changed. This keeps them simple at the cost of some allocations.

put_in could be written as a recursive put at every level, but that
would repeat equality checks on each level. Instead the value at the
path is combined once, then stored with assoc_in.
"""

from functools import reduce

from .assoc import assoc, assoc_in
from .classify import Kind, kind_of, is_dict, is_primitive, is_path, to_dict
from .equality import is_, equal_by
from .reading import get, get_in
from .validation import validate


__all__ = [
    "put", "put_in", "put_by", "put_in_by",
    "patch", "patch_in",
    "merge", "merge_in",
    ]


# =============================================================================
#
# Public operators
#
# =============================================================================

def put(prev, *args):
    """Replace a value, preserving old references where possible.

    put(prev, next) replaces prev with next as a whole.
    put(prev, key, next) replaces the value at key in prev.

    Lists are combined index by index and dicts key by key, keeping
    only the keys of next. Atomic values are replaced as they are.
    """
    if len(args) == 1:
        return put_any(prev, args[0])
    if len(args) == 2:
        key, next = args
        validate(key, is_primitive)
        return assoc(prev, key, put_any(get(prev, key), next))
    raise TypeError(
        "put() takes 2 or 3 positional arguments but {} were given".format(len(args) + 1))


def put_in(prev, path, next):
    "Replace the value at path in prev, preserving old references where possible."
    validate(path, is_path)
    return assoc_in(prev, path, put_any(get_in(prev, path), next))


def put_by(prev, key, fun, *args):
    "Replace the value at key with fun(old_value, *args)."
    validate(fun, callable)
    return put(prev, key, fun(get(prev, key), *args))


def put_in_by(prev, path, fun, *args):
    "Replace the value at path with fun(old_value, *args)."
    validate(fun, callable)
    return put_in(prev, path, fun(get_in(prev, path), *args))


def patch(prev, next, *rest):
    """Combine dicts one level deep, preserving old references where possible.

    Keys of prev missing from next are kept. Keys of next are put
    over the values in prev, so nested dicts are replaced rather than
    combined. Non-dict operands count as empty dicts. With more than
    two operands the patches are applied left to right.
    """
    if rest:
        return reduce(_patch_two, rest, _patch_two(prev, next))
    return _patch_two(prev, next)


def patch_in(prev, path, next):
    "Patch the dict at path in prev with next."
    validate(path, is_path)
    return assoc_in(prev, path, _patch_two(get_in(prev, path), next))


def merge(prev, next, *rest):
    """Combine dicts at every depth, preserving old references where possible.

    Works like patch, except that a key holding a dict in both
    operands is merged recursively instead of being replaced.
    """
    if rest:
        return reduce(_merge_two, rest, _merge_two(prev, next))
    return _merge_two(prev, next)


def merge_in(prev, path, next):
    "Merge next into the dict at path in prev."
    validate(path, is_path)
    return assoc_in(prev, path, _merge_two(get_in(prev, path), next))


# =============================================================================
#
# Combining functions
#
# =============================================================================

def put_any(prev, next):
    if is_(prev, next):
        return prev
    kind = kind_of(prev)
    if kind is Kind.LIST and kind_of(next) is Kind.LIST:
        return _replace_list_by(prev, next, put_any)
    if kind is Kind.DICT and kind_of(next) is Kind.DICT:
        return _replace_dict_by(prev, next, put_any)
    return next


def _patch_two(prev, next):
    if is_(prev, next):
        return to_dict(prev)
    return _patch_dict_by(to_dict(prev), to_dict(next), put_any)


def _merge_two(prev, next):
    if is_(prev, next):
        return to_dict(prev)
    return _patch_dict_by(to_dict(prev), to_dict(next), _merge_any)


def _merge_any(prev, next):
    if is_dict(prev) and is_dict(next):
        return _merge_two(prev, next)
    return put_any(prev, next)


def _replace_list_by(prev, next, fun):
    n = len(prev)
    out = [fun(prev[i] if i < n else None, value) for i, value in enumerate(next)]
    return prev if equal_by(prev, out, is_) else out


def _replace_dict_by(prev, next, fun):
    out = {}
    for key, value in next.items():
        value = fun(prev.get(key), value)
        if value is not None:
            out[key] = value
    return prev if equal_by(prev, out, is_) else out


def _patch_dict_by(prev, next, fun):
    out = {}
    for key, value in prev.items():
        if value is not None and key not in next:
            out[key] = value
    for key, value in next.items():
        value = fun(prev.get(key), value)
        if value is not None:
            out[key] = value
    return prev if equal_by(prev, out, is_) else out
