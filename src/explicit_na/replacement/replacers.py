"""Masked write of resolved replacement values into a sequence.

Only positions that are missing are ever written. Both paths leave the input
untouched and return it as-is when there is nothing to do.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from explicit_na.config.options import NaOptions
from explicit_na.replacement.specs import One, ReplacementSpec, Resolved, resolve
from explicit_na.replacement.vectors import Vector
from explicit_na.types import Kind, category_kind
from explicit_na.utils.missing import scalar_is_missing, which_missing

logger = logging.getLogger(__name__)


def _plan(positions: np.ndarray, resolved: Resolved) -> tuple[np.ndarray, list[Any]] | None:
    """Positions to write and their values, or None when no value is usable."""
    if isinstance(resolved, One):
        if scalar_is_missing(resolved.value):
            logger.warning("Replacement value is missing; returning values unchanged")
            return None
        return positions, [resolved.value] * len(positions)

    picked = [resolved.values[i] for i in positions]
    usable = np.array([not scalar_is_missing(v) for v in picked], dtype=bool)
    if not usable.any():
        logger.warning("Replacement values are all missing; returning values unchanged")
        return None
    if not usable.all():
        logger.warning(
            "Replacement values contain missing values; %d of %d position(s) stay missing",
            int((~usable).sum()),
            len(picked),
        )
    return positions[usable], [v for v, ok in zip(picked, usable) if ok]


def _write(vector: Vector, series: pd.Series, positions: np.ndarray, values: list[Any]) -> Any:
    out = series.copy()
    out.iloc[positions] = values
    return vector.restore(out)


def replace_default(
    vector: Vector,
    spec: ReplacementSpec | None,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    options: NaOptions,
) -> Any:
    positions = which_missing(vector.series)
    if positions.size == 0:
        return vector.source

    default = options.explicit if vector.kind is Kind.TEXT else None
    resolved = resolve(vector, spec, args, kwargs, kind=vector.kind, default=default)
    plan = _plan(positions, resolved)
    if plan is None:
        return vector.source
    return _write(vector, vector.series, *plan)


def _new_labels(resolved: Resolved, categories: pd.Index) -> list[Any]:
    values = [resolved.value] if isinstance(resolved, One) else resolved.values
    existing = set(categories)
    fresh = dict.fromkeys(v for v in values if not scalar_is_missing(v) and v not in existing)
    return list(fresh)


def replace_categorical(
    vector: Vector,
    spec: ReplacementSpec | None,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    options: NaOptions,
) -> Any:
    """Fill missing categorical entries, appending unseen labels to the categories."""
    positions = which_missing(vector.series)
    if positions.size == 0:
        return vector.source

    dtype = vector.series.dtype
    resolved = resolve(
        vector, spec, args, kwargs, kind=category_kind(dtype), default=options.explicit
    )
    plan = _plan(positions, resolved)
    if plan is None:
        return vector.source

    series = vector.series
    added = _new_labels(resolved, dtype.categories)
    if added:
        if options.verbose:
            logger.info("Adding levels to categorical: %s", ", ".join(map(str, added)))
        series = series.cat.add_categories(added)
    return _write(vector, series, *plan)
