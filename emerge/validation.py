# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .classify import is_dict, is_list, is_natural


class ValidationError(ValueError):
    pass


def show(value):
    "Render a value for use in an error message."
    if callable(value):
        return getattr(value, "__name__", None) or repr(value)
    if is_list(value) or is_dict(value):
        try:
            return json.dumps(value, default=repr)
        except (TypeError, ValueError):
            # Non-string keys or circular structures
            return repr(value)
    return repr(value)


def validate(value, test):
    """Raise ValidationError unless test(value) holds.

    Checks are made before any work is done, so a failed
    validation never leaves a partially built value behind.
    """
    if not test(value):
        raise ValidationError(
            "Expected {} to satisfy test {}".format(show(value), show(test)))
    return value


def validate_bounds(lst, index):
    "Validate index as an insertion position into lst, i.e. 0 <= index <= len(lst)."
    validate(index, is_natural)
    if not index <= len(lst):
        raise ValidationError(
            "Index {} out of bounds for length {}".format(index, len(lst)))
    return index
