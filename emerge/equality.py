# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .classify import Kind, kind_of, is_nan
from .validation import validate


__all__ = ["is_", "equal", "equal_by"]


def _is_number(value):
    return isinstance(value, (int, float, complex)) and not isinstance(value, bool)


def is_(one, other):
    """Identity comparison, with value semantics for primitives.

    Primitives of the same family compare by value (numbers across
    int/float/complex, str with str, bytes with bytes). Anything else
    compares by identity. NaN is considered equal to NaN so that the
    relation is reflexive for every value.
    """
    if one is other:
        return True
    if kind_of(one) is not Kind.PRIMITIVE or kind_of(other) is not Kind.PRIMITIVE:
        return False
    if _is_number(one) and _is_number(other):
        return one == other or (is_nan(one) and is_nan(other))
    # bool and None are singletons and were handled by the identity check
    return type(one) is type(other) and type(one) in (str, bytes) and one == other


def equal(one, other):
    "Deep structural equality of lists and dicts, is_ at the leaves."
    return equal_by(one, other, equal)


def equal_by(one, other, fun):
    """Compare one and other one level deep, using fun for the children.

    Passing `is_` as fun gives a shallow comparison, useful for
    checking whether a freshly built container can be swapped
    for an existing one.
    """
    validate(fun, callable)
    if is_(one, other):
        return True
    kind = kind_of(one)
    if kind is not kind_of(other):
        return False
    if kind is Kind.LIST:
        return _every_list_pair_by(one, other, fun)
    if kind is Kind.DICT:
        return _every_dict_pair_by(one, other, fun)
    return False


def _every_list_pair_by(one, other, fun):
    if len(one) != len(other):
        return False
    for a, b in zip(one, other):
        if not fun(a, b):
            return False
    return True


def _every_dict_pair_by(one, other, fun):
    if len(one) != len(other):
        return False
    # Breadth-first check in case a key has been added or removed
    for key in one:
        if key not in other:
            return False
    # Now a depth-first comparison
    for key, value in one.items():
        if not fun(value, other[key]):
            return False
    return True
