from __future__ import annotations

from enum import Enum

import pandas as pd
from pandas.api import types as ptypes

from explicit_na.utils.errors import UnsupportedStructureError


class Kind(Enum):
    """Declared element kind of a flat sequence."""

    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TEXT = "text"
    CATEGORICAL = "categorical"


# Kinds that carry a sentinel-label default when no replacement is given.
LABEL_KINDS = frozenset({Kind.TEXT, Kind.CATEGORICAL})

# pandas.api.types.infer_dtype results accepted for object-dtype data.
_INFERRED_KINDS: dict[str, Kind] = {
    "string": Kind.TEXT,
    "integer": Kind.INTEGER,
    "floating": Kind.FLOAT,
    "mixed-integer-float": Kind.FLOAT,
    "boolean": Kind.BOOLEAN,
    # every element missing: no declared kind, treated as boolean NA
    "empty": Kind.BOOLEAN,
}


def _kind_of_dtype(dtype, values=None) -> Kind:
    if isinstance(dtype, pd.CategoricalDtype):
        return Kind.CATEGORICAL
    if isinstance(dtype, pd.StringDtype):
        return Kind.TEXT
    if ptypes.is_bool_dtype(dtype):
        return Kind.BOOLEAN
    if ptypes.is_integer_dtype(dtype):
        return Kind.INTEGER
    if ptypes.is_float_dtype(dtype):
        return Kind.FLOAT
    if ptypes.is_object_dtype(dtype) and values is not None:
        inferred = ptypes.infer_dtype(values, skipna=True)
        kind = _INFERRED_KINDS.get(inferred)
        if kind is not None:
            return kind
        raise UnsupportedStructureError(
            ctx={"reason": "heterogeneous_elements", "inferred": inferred}
        )
    raise UnsupportedStructureError(ctx={"reason": "unsupported_dtype", "dtype": str(dtype)})


def kind_of(series: pd.Series) -> Kind:
    return _kind_of_dtype(series.dtype, series)


def category_kind(dtype: pd.CategoricalDtype) -> Kind:
    """Kind of the label values of a categorical dtype."""
    categories = dtype.categories
    if len(categories) == 0:
        return Kind.TEXT
    return _kind_of_dtype(categories.dtype, categories)


__all__ = ["Kind", "LABEL_KINDS", "kind_of", "category_kind"]
