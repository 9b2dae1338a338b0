# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from emerge import is_, equal, equal_by, ValidationError


class Thing(object):
    def __eq__(self, other):
        return True


nan = float("nan")


def test_is_primitives():
    assert is_(None, None)
    assert is_(1, 1)
    assert is_(1, 1.0)
    assert is_("a", "a")
    assert is_(b"a", b"a")
    assert is_(True, True)
    assert is_(nan, nan)
    assert is_(nan, float("nan"))

    assert not is_(1, 2)
    assert not is_(True, 1)
    assert not is_(0, False)
    assert not is_(None, 0)
    assert not is_("a", b"a")
    assert not is_("1", 1)
    assert not is_(nan, 0.0)


def test_is_objects_by_identity():
    a = [1]
    d = {}
    assert is_(a, a)
    assert is_(d, d)
    assert not is_([1], [1])
    assert not is_({}, {})
    # Atomic values are never compared by value, even when they say so
    assert not is_(Thing(), Thing())


def test_equal_reflexive():
    values = [None, 0, nan, "x", [], {}, [nan, {"a": nan}], {"a": [1, {"b": None}]}, Thing()]
    for v in values:
        assert equal(v, v)
        assert equal(v, copy.deepcopy(v)) or isinstance(v, Thing)


def test_equal_lists():
    assert equal([1, 2, 3], [1, 2, 3])
    assert equal([1, [2, [3]]], [1, [2, [3]]])
    assert equal((1, 2), [1, 2])
    assert not equal([1, 2], [1, 2, 3])
    assert not equal([1, 2, 3], [1, 2])
    assert not equal([1, [2]], [1, [3]])


def test_equal_dicts():
    assert equal({"a": 1, "b": {"c": [1]}}, {"b": {"c": [1]}, "a": 1})
    assert not equal({"a": 1}, {"a": 1, "b": 2})
    assert not equal({"a": 1, "b": 2}, {"a": 1})
    assert not equal({"a": 1}, {"b": 1})
    assert not equal({"a": {"c": 1}}, {"a": {"c": 2}})
    # None is a value when comparing
    assert not equal({"a": None}, {})


def test_equal_mismatched_kinds():
    assert not equal([], {})
    assert not equal({}, [])
    assert not equal([1], 1)
    assert not equal({"a": 1}, None)


def test_equal_atomic():
    t = Thing()
    assert equal(t, t)
    assert not equal(Thing(), Thing())
    assert equal({"t": t}, {"t": t})
    assert not equal({"t": Thing()}, {"t": Thing()})


def test_equal_by_is_is_shallow():
    inner = {"b": 1}
    assert equal_by({"a": inner}, {"a": inner}, is_)
    assert not equal_by({"a": {"b": 1}}, {"a": {"b": 1}}, is_)
    assert equal_by([1, "x"], [1, "x"], is_)


def test_equal_by_custom_predicate():
    def close(a, b):
        return abs(a - b) < 0.5
    assert equal_by([1.0, 2.0], [1.1, 2.2], close)
    assert not equal_by([1.0, 2.0], [1.1, 3.0], close)
    assert equal_by({"a": 1.0}, {"a": 1.2}, close)


def test_equal_by_rejects_non_callable():
    with pytest.raises(ValidationError):
        equal_by(1, 1, "not a function")
    with pytest.raises(ValidationError) as e:
        equal_by([], [], None)
    assert "callable" in str(e.value)
