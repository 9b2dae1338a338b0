# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .classify import is_integer, is_natural, to_list
from .validation import validate, validate_bounds


__all__ = ["insert_at_index", "remove_at_index"]


def insert_at_index(lst, index, value):
    """Return a new list with value inserted before index.

    Non-list input counts as an empty list. index may range from 0
    to len(lst) inclusive, anything else raises ValidationError.
    """
    lst = to_list(lst)
    validate_bounds(lst, index)
    out = list(lst)
    out.insert(index, value)
    return out


def remove_at_index(lst, index):
    """Return a new list without the value at index.

    index must be an integer, but an index out of range is not an
    error: the (list-coerced) input is returned as it is.
    """
    validate(index, is_integer)
    lst = to_list(lst)
    if is_natural(index) and index < len(lst):
        out = list(lst)
        del out[index]
        return out
    return lst
