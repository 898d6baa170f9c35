"""Type-safe coercion of replacement values into a sequence's element kind.

A value that converts but cannot be converted back unchanged (``2.5`` into an
integer kind) is rejected outright. A value that cannot be converted at all
(``"a"`` into an integer kind) becomes missing; that is tolerated with a
warning as long as at least one value survived.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable

import numpy as np
from pandas.api.types import is_scalar

from explicit_na.types import Kind
from explicit_na.utils.errors import TypeCoercionError
from explicit_na.utils.missing import scalar_is_missing

logger = logging.getLogger(__name__)

_FAILED = object()
_LOSSY = object()

_TRUE_STRINGS = frozenset({"true", "t"})
_FALSE_STRINGS = frozenset({"false", "f"})


@dataclass(frozen=True)
class Coerced:
    """Coercion result: a scalar or list of Python values, ``None`` for missing."""

    values: Any
    failed: tuple[int, ...] = ()


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _to_integer(value: Any) -> Any:
    if _is_bool(value):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return _LOSSY
        if not math.isfinite(number):
            return _FAILED
        return int(number) if number.is_integer() else _LOSSY
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return _FAILED
        if not math.isfinite(number):
            return _FAILED
        return int(number) if number.is_integer() else _LOSSY
    return _FAILED


def _to_float(value: Any) -> Any:
    if _is_bool(value):
        return float(value)
    if isinstance(value, numbers.Integral):
        try:
            number = float(value)
        except OverflowError:
            return _LOSSY
        return number if int(number) == int(value) else _LOSSY
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return _FAILED
    return _FAILED


def _to_boolean(value: Any) -> Any:
    if _is_bool(value):
        return bool(value)
    if isinstance(value, numbers.Real):
        if value == 0:
            return False
        if value == 1:
            return True
        return _LOSSY
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    return _FAILED


def _to_text(value: Any) -> Any:
    return str(value) if is_scalar(value) else _FAILED


_CONVERTERS: dict[Kind, Callable[[Any], Any]] = {
    Kind.INTEGER: _to_integer,
    Kind.FLOAT: _to_float,
    Kind.BOOLEAN: _to_boolean,
    Kind.TEXT: _to_text,
}


def _convert(value: Any, kind: Kind) -> Any:
    if scalar_is_missing(value):
        return None
    converted = _CONVERTERS[kind](value)
    if converted is _LOSSY:
        raise TypeCoercionError(
            ctx={"reason": "irreversible", "kind": kind.value, "value": value}
        )
    return converted


def coerce_safe(values: Any, kind: Kind) -> Coerced:
    """Coerce a scalar or a list of values to ``kind``.

    Raises TypeCoercionError when a value would change on the way back or when
    no non-missing value is convertible.
    """
    if not isinstance(values, list):
        converted = _convert(values, kind)
        if converted is _FAILED:
            raise TypeCoercionError(
                ctx={"reason": "not_convertible", "kind": kind.value, "value": values}
            )
        return Coerced(converted)

    out: list[Any] = []
    failed: list[int] = []
    present = 0
    for index, value in enumerate(values):
        converted = _convert(value, kind)
        if converted is None:
            out.append(None)
            continue
        present += 1
        if converted is _FAILED:
            failed.append(index)
            out.append(None)
        else:
            out.append(converted)

    if failed and len(failed) == present:
        raise TypeCoercionError(
            ctx={
                "reason": "not_convertible",
                "kind": kind.value,
                "value": values[failed[0]],
                "failed": len(failed),
            }
        )
    if failed:
        logger.warning(
            "Coercion to %s introduced %d missing replacement value(s) at positions %s",
            kind.value,
            len(failed),
            failed[:10],
        )
    return Coerced(out, tuple(failed))
