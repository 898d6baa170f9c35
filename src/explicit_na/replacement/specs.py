"""Replacement specifications and their resolution into concrete values.

A caller hands ``na_replace`` a scalar, a per-position vector, or a function.
``as_spec`` classifies that argument; ``resolve`` evaluates functions, checks
cardinality and coerces the values to the target kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

import numpy as np
import pandas as pd
from pandas.api.types import is_scalar

from explicit_na.replacement.vectors import Vector
from explicit_na.types import Kind
from explicit_na.utils.coercion import coerce_safe
from explicit_na.utils.errors import (
    CardinalityError,
    MissingReplacementError,
    TypeCoercionError,
    UnsupportedStructureError,
)


@dataclass(frozen=True)
class ScalarSpec:
    value: Any


@dataclass(frozen=True)
class VectorSpec:
    values: tuple[Any, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class GeneratorSpec:
    fn: Callable[..., Any]


ReplacementSpec = Union[ScalarSpec, VectorSpec, GeneratorSpec]


@dataclass(frozen=True)
class One:
    value: Any


@dataclass(frozen=True)
class Many:
    values: tuple[Any, ...]


Resolved = Union[One, Many]


def as_spec(raw: Any) -> ReplacementSpec:
    """Classify a caller-supplied replacement; length-1 vectors become scalars."""
    if isinstance(raw, (ScalarSpec, VectorSpec, GeneratorSpec)):
        return raw
    if raw is None or is_scalar(raw):
        return ScalarSpec(raw)
    if callable(raw):
        return GeneratorSpec(raw)
    if isinstance(raw, (pd.DataFrame, Mapping, set, frozenset)):
        raise UnsupportedStructureError(
            ctx={"reason": "composite_replacement", "type": type(raw).__name__}
        )
    if isinstance(raw, np.ndarray) and raw.ndim != 1:
        raise UnsupportedStructureError(ctx={"reason": "not_one_dimensional", "type": "ndarray"})
    try:
        values = tuple(raw)
    except TypeError as exc:
        raise UnsupportedStructureError(
            ctx={"reason": "not_a_sequence", "type": type(raw).__name__}, cause=exc
        )
    if len(values) == 1:
        return ScalarSpec(values[0])
    return VectorSpec(values)


def check_cardinality(spec: ReplacementSpec, length: int) -> None:
    if isinstance(spec, VectorSpec) and len(spec) not in (1, length):
        raise CardinalityError(
            ctx={
                "reason": "recycling_not_allowed",
                "replacement_length": len(spec),
                "expected": [1, length],
            }
        )


def materialize(
    vector: Vector,
    spec: ReplacementSpec,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
) -> ScalarSpec | VectorSpec:
    """Evaluate a generator once against the caller's sequence."""
    if not isinstance(spec, GeneratorSpec):
        return spec
    result = as_spec(spec.fn(vector.source, *args, **(kwargs or {})))
    if isinstance(result, GeneratorSpec):
        raise TypeCoercionError(ctx={"reason": "generator_returned_callable"})
    check_cardinality(result, len(vector))
    return result


def resolve(
    vector: Vector,
    spec: ReplacementSpec | None,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
    *,
    kind: Kind,
    default: str | None = None,
) -> Resolved:
    """Turn ``spec`` into values of ``kind``.

    ``default`` stands in for a missing ``spec``; without one the call fails
    with MissingReplacementError.
    """
    if spec is None:
        if default is None:
            raise MissingReplacementError(ctx={"kind": vector.kind.value})
        spec = ScalarSpec(default)
    concrete = materialize(vector, spec, args, kwargs)
    if isinstance(concrete, ScalarSpec):
        return One(coerce_safe(concrete.value, kind).values)
    return Many(tuple(coerce_safe(list(concrete.values), kind).values))
