"""Adapter between caller-owned sequences and pandas Series.

Every supported container is viewed as a ``pd.Series`` plus a ``restore``
callable that rebuilds the caller's container type from a filled Series.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
import pandas as pd
from pandas.api.extensions import ExtensionArray
from pandas.api.types import is_scalar

from explicit_na.types import Kind, kind_of
from explicit_na.utils.errors import UnsupportedStructureError
from explicit_na.utils.missing import scalar_is_missing


@dataclass(frozen=True)
class Vector:
    source: Any
    series: pd.Series
    kind: Kind
    restore: Callable[[pd.Series], Any]

    def __len__(self) -> int:
        return len(self.series)


def _reject(x: Any, reason: str) -> UnsupportedStructureError:
    return UnsupportedStructureError(ctx={"reason": reason, "type": type(x).__name__})


def _restore_sequence(original: list | tuple) -> Callable[[pd.Series], Any]:
    def restore(filled: pd.Series) -> Any:
        out = [
            new if scalar_is_missing(old) and not scalar_is_missing(new) else old
            for old, new in zip(original, filled.tolist())
        ]
        return tuple(out) if isinstance(original, tuple) else out

    return restore


def as_vector(x: Any) -> Vector:
    """Wrap a flat sequence; raise UnsupportedStructureError for anything else."""
    if isinstance(x, pd.DataFrame):
        raise _reject(x, "table_input")
    if isinstance(x, (Mapping, set, frozenset)):
        raise _reject(x, "composite_input")

    if isinstance(x, pd.Series):
        series, restore = x, (lambda filled: filled)
    elif isinstance(x, pd.Index):
        if isinstance(x, pd.MultiIndex):
            raise _reject(x, "composite_input")
        series = pd.Series(x.array)
        restore = lambda filled: pd.Index(filled.array, name=x.name)
    elif isinstance(x, ExtensionArray):
        series = pd.Series(x)
        restore = lambda filled: filled.array
    elif isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise _reject(x, "not_one_dimensional")
        series = pd.Series(x)
        restore = lambda filled: filled.to_numpy(dtype=x.dtype)
    elif isinstance(x, (list, tuple)):
        if any(not is_scalar(v) and v is not None for v in x):
            raise _reject(x, "nested_elements")
        series = pd.Series(pd.array(list(x)))
        restore = _restore_sequence(x)
    else:
        raise _reject(x, "not_a_sequence")

    return Vector(source=x, series=series, kind=kind_of(series), restore=restore)
