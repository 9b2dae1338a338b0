# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .classify import Kind, kind_of, is_primitive, is_list, is_dict
from .equality import is_, equal, equal_by
from .reading import get, get_in, scan
from .updating import (
    put, put_in, put_by, put_in_by,
    patch, patch_in,
    merge, merge_in,
)
from .lists import insert_at_index, remove_at_index
from .validation import ValidationError


__all__ = [
    "__version__",
    "Kind", "kind_of", "is_primitive", "is_list", "is_dict",
    "is_", "equal", "equal_by",
    "get", "get_in", "scan",
    "put", "put_in", "put_by", "put_in_by",
    "patch", "patch_in",
    "merge", "merge_in",
    "insert_at_index", "remove_at_index",
    "ValidationError",
    ]
