import numpy as np
import pandas as pd
import pytest

from explicit_na.replacement.vectors import as_vector
from explicit_na.types import Kind
from explicit_na.utils.errors import Err, UnsupportedStructureError


@pytest.mark.parametrize(
    "values, kind",
    [
        ([1, None, 3], Kind.INTEGER),
        ([1.5, None], Kind.FLOAT),
        ([True, None], Kind.BOOLEAN),
        (["a", None], Kind.TEXT),
        (np.array([1.0, np.nan]), Kind.FLOAT),
        (np.array([1, None, 3], dtype=object), Kind.INTEGER),
        (pd.Categorical([None, "b"]), Kind.CATEGORICAL),
        (pd.Series(["x", None], dtype="category"), Kind.CATEGORICAL),
        (pd.array([1, None], dtype="Int64"), Kind.INTEGER),
        (pd.Index([1.0, np.nan]), Kind.FLOAT),
    ],
)
def test_kind_detection(values, kind):
    assert as_vector(values).kind is kind


def test_all_missing_list_has_boolean_kind():
    assert as_vector([None, None, None]).kind is Kind.BOOLEAN


def test_tuple_restores_as_tuple_and_keeps_untouched_elements():
    marker = float("nan")
    vector = as_vector((1, marker, None))
    filled = vector.series.copy()
    filled.iloc[2] = 7
    out = vector.restore(filled)
    assert isinstance(out, tuple)
    assert out[0] == 1
    assert out[1] is marker
    assert out[2] == 7


@pytest.mark.parametrize(
    "value, reason",
    [
        (pd.DataFrame({"a": [1, None]}), "table_input"),
        ({"a": 1}, "composite_input"),
        ({1, 2}, "composite_input"),
        ([[1, None], [2]], "nested_elements"),
        (np.zeros((2, 2)), "not_one_dimensional"),
        (5, "not_a_sequence"),
        ("abc", "not_a_sequence"),
    ],
)
def test_rejects_composite_input(value, reason):
    with pytest.raises(UnsupportedStructureError) as err:
        as_vector(value)
    assert err.value.code is Err.UNSUPPORTED_STRUCTURE
    assert err.value.ctx["reason"] == reason


def test_rejects_heterogeneous_elements():
    with pytest.raises(UnsupportedStructureError) as err:
        as_vector(np.array([1, "a", None], dtype=object))
    assert err.value.ctx["reason"] == "heterogeneous_elements"
