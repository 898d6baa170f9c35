"""End-to-end properties of na_replace across container types."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pytest

from explicit_na import (
    CardinalityError,
    TypeCoercionError,
    is_missing,
    na_explicit,
    na_replace,
)

CASES = [
    ([1, None, 3, None], 0),
    ((1.5, None), [2.0, 9.0]),
    (np.array([np.nan, 2.0, np.nan]), 1),
    (pd.Series([True, None], dtype="boolean"), True),
    (pd.Series(["a", None, "c"], dtype="string"), "z"),
    (pd.array([None, 4], dtype="Int64"), [7, 7]),
    (pd.Categorical(["x", None]), "y"),
    (pd.Index([1.0, np.nan]), 0.5),
]


def _kind_signature(obj):
    return type(obj), getattr(obj, "dtype", None)


@pytest.mark.parametrize("values, na", CASES)
def test_type_and_length_preserved(values, na):
    out = na_replace(values, na)
    assert len(out) == len(values)
    if isinstance(values, pd.Categorical):
        assert isinstance(out, pd.Categorical)
    else:
        assert _kind_signature(out) == _kind_signature(values)
    assert not is_missing(out).any()


@pytest.mark.parametrize("values, na", CASES)
def test_non_missing_positions_never_change(values, na):
    before = list(values)
    out = list(na_replace(values, na))
    for old, new, was_missing in zip(before, out, is_missing(values)):
        if not was_missing:
            assert old == new


def test_documented_examples():
    assert na_replace([1, None, 3, None], 2) == [1, 2, 3, 2]
    assert na_replace([1, None, 3, None], [1, 2, 3, 4]) == [1, 2, 3, 4]
    with pytest.raises(CardinalityError):
        na_replace([1, 2, 3, None], [9, 9])
    with pytest.raises(TypeCoercionError):
        na_replace([1, None, 3, None], ["a", "b", "c", "d"])

    fct = pd.Categorical([None, "b", "c", "d", None])
    out = na_replace(fct, "z")
    assert list(out) == ["z", "b", "c", "d", "z"]
    assert list(out.categories) == ["b", "c", "d", "z"]


def test_all_missing_replacement_never_raises(caplog):
    values = [None, None, None]
    with caplog.at_level(logging.WARNING):
        assert na_replace(values, [None, None, None]) is values
    assert caplog.records


def test_explicit_alias_on_text_and_categorical():
    lets = ["a", None, "c", None, "e"]
    assert na_explicit(lets) == ["a", "(NA)", "c", "(NA)", "e"]
    fct = pd.Series(lets, dtype="category")
    out = na_explicit(fct)
    assert out.dtype.name == "category"
    assert "(NA)" in out.cat.categories
