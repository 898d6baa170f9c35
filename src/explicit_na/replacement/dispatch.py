"""Entry points: validate once, then route on the element kind."""

from __future__ import annotations

import logging
from typing import Any

from explicit_na.config.options import NaOptions, get_options
from explicit_na.replacement.replacers import replace_categorical, replace_default
from explicit_na.replacement.specs import (
    GeneratorSpec,
    ReplacementSpec,
    ScalarSpec,
    as_spec,
    check_cardinality,
)
from explicit_na.replacement.vectors import Vector, as_vector
from explicit_na.types import LABEL_KINDS, Kind
from explicit_na.utils.missing import all_missing

logger = logging.getLogger(__name__)

_UNSET = object()


def _prevalidate(vector: Vector, spec: ReplacementSpec | None) -> None:
    if spec is None:
        return
    if isinstance(spec, GeneratorSpec) and all_missing(vector.series):
        logger.warning("All values are missing; the replacement function receives no data")
    check_cardinality(spec, len(vector))


def _replace(
    vector: Vector,
    spec: ReplacementSpec | None,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    options: NaOptions,
) -> Any:
    _prevalidate(vector, spec)
    if vector.kind is Kind.CATEGORICAL:
        return replace_categorical(vector, spec, args, kwargs, options=options)
    return replace_default(vector, spec, args, kwargs, options=options)


def na_replace(
    x: Any,
    na: Any = _UNSET,
    *args: Any,
    options: NaOptions | None = None,
    **kwargs: Any,
) -> Any:
    """Replace missing values in ``x`` without changing its type or length.

    Args:
        x: Flat sequence (list, tuple, 1-D ndarray, Series, Categorical, Index).
        na: Scalar, ``len(x)`` vector, or function called as ``na(x, *args, **kwargs)``.
            Optional for text and categorical data, which default to the
            configured explicit label. A sequence whose elements are all
            missing has no declared kind and is treated as boolean, so only
            boolean-convertible replacements (True/False, 0/1) are accepted.
        options: Overrides the process-wide ``NaOptions``.

    Returns:
        An object of the same container type, dtype and length as ``x``. When
        nothing can be replaced, ``x`` itself is returned.

    Raises:
        UnsupportedStructureError: ``x`` is a table, mapping or nested sequence.
        CardinalityError: ``na`` has a length other than 1 or ``len(x)``.
        TypeCoercionError: ``na`` cannot be represented in the kind of ``x``.
        MissingReplacementError: ``na`` omitted for numeric or boolean data
            that has missing values.
    """
    vector = as_vector(x)
    opts = options if options is not None else get_options()
    spec = None if na is _UNSET else as_spec(na)
    return _replace(vector, spec, args, kwargs, opts)


def na_explicit(x: Any, *, options: NaOptions | None = None) -> Any:
    """Replace missing values with the configured explicit label.

    Numeric and boolean data have no label representation and are returned
    unchanged.
    """
    vector = as_vector(x)
    opts = options if options is not None else get_options()
    if vector.kind not in LABEL_KINDS:
        logger.debug("No explicit label for %s data; returning values unchanged", vector.kind.value)
        return x
    return _replace(vector, ScalarSpec(opts.explicit), (), {}, opts)
