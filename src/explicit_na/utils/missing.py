"""Missingness helpers shared by the replacers.

Missing follows pandas semantics: ``None``, ``NaN``, ``pd.NA`` and ``NaT``.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
from pandas.api.types import is_scalar


def scalar_is_missing(value: Any) -> bool:
    # containers are never a missing scalar
    if not is_scalar(value):
        return False
    return bool(pd.isna(value))


def is_missing(x: Any) -> np.ndarray:
    """Boolean mask of missing positions, one entry per element of ``x``."""
    if isinstance(x, (list, tuple)):
        return np.fromiter((scalar_is_missing(v) for v in x), dtype=bool, count=len(x))
    return np.asarray(pd.isna(x), dtype=bool).reshape(-1)


def which_missing(x: Any) -> np.ndarray:
    return np.flatnonzero(is_missing(x))


def any_missing(x: Any) -> bool:
    return bool(is_missing(x).any())


def all_missing(x: Any) -> bool:
    mask = is_missing(x)
    return bool(mask.size) and bool(mask.all())
