# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Classification of values into the kinds the update engine knows about.

Every value falls into exactly one of four kinds:

    PRIMITIVE   None, bool, int, float, complex, str, bytes
    LIST        list or tuple
    DICT        instances whose type is exactly dict
    ATOMIC      anything else: functions, class instances, dates, sets,
                dict subclasses, ...

Lists and dicts are the only kinds the engine looks inside of. Atomic
values are compared by identity and always replaced wholesale.
"""

import enum
import math


__all__ = [
    "Kind", "kind_of",
    "is_primitive", "is_list", "is_dict", "is_atomic",
    "is_nan", "is_integer", "is_natural", "is_path",
    "to_list", "to_dict", "to_key",
    ]


PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes)

LIST_TYPES = (list, tuple)


class Kind(enum.Enum):
    "The closed set of value kinds."
    PRIMITIVE = "primitive"
    LIST = "list"
    DICT = "dict"
    ATOMIC = "atomic"


def kind_of(value):
    "Classify a value. Not cached, recomputed on every call."
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    if isinstance(value, LIST_TYPES):
        return Kind.LIST
    # Subclasses of dict carry their own semantics, treat them atomically
    if type(value) is dict:
        return Kind.DICT
    return Kind.ATOMIC


def is_primitive(value):
    return kind_of(value) is Kind.PRIMITIVE


def is_list(value):
    return kind_of(value) is Kind.LIST


def is_dict(value):
    return kind_of(value) is Kind.DICT


def is_atomic(value):
    return kind_of(value) is Kind.ATOMIC


def is_nan(value):
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, complex):
        return math.isnan(value.real) or math.isnan(value.imag)
    return False


def is_integer(value):
    # bool is a subclass of int but never a valid index
    return isinstance(value, int) and not isinstance(value, bool)


def is_natural(value):
    return is_integer(value) and value >= 0


def is_path(value):
    return is_list(value) and all(is_primitive(key) for key in value)


def to_list(value):
    return value if is_list(value) else []


def to_dict(value):
    return value if is_dict(value) else {}


def to_key(value):
    "Dict keys are always strings, other primitives are converted."
    return value if isinstance(value, str) else str(value)
