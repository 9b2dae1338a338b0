# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Low level insertion of a value at a key or path.

assoc does not try to combine the old and new values the way put
does, it only avoids allocating when the very same value is already
in place. The update operators build on it once they have computed
the value to store.
"""

from .classify import is_list, to_dict, to_key
from .equality import is_, equal_by
from .reading import get, get_in
from .validation import validate_bounds


def assoc(prev, key, next):
    "Store next at key in prev, returning prev if nothing changes."
    if is_list(prev):
        return assoc_at_index(prev, key, next)
    return assoc_at_key(to_dict(prev), key, next)


def assoc_in(prev, path, next):
    "Store next at path in prev, returning prev if nothing changes."
    if not len(path):
        return next
    # Avoid copying every level on the way down for a no-op write
    if is_(get_in(prev, path), next):
        return prev
    out = _assoc_in_at(prev, path, next, 0)
    return prev if equal_by(prev, out, is_) else out


def _assoc_in_at(prev, path, next, index):
    key = path[index]
    if index < len(path) - 1:
        next = _assoc_in_at(get(prev, key), path, next, index + 1)
    return assoc(prev, key, next)


def assoc_at_index(lst, index, value):
    validate_bounds(lst, index)
    if index < len(lst) and is_(lst[index], value):
        return lst
    out = list(lst)
    if index == len(out):
        out.append(value)
    else:
        out[index] = value
    return out


def assoc_at_key(dct, key, value):
    key = to_key(key)
    if value is None:
        if key not in dct:
            return dct
    elif key in dct and is_(dct[key], value):
        return dct
    # Build a new dict, omitting nil values
    out = {k: v for k, v in dct.items() if k != key and v is not None}
    if value is not None:
        out[key] = value
    return out
