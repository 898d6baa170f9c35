"""Process-wide options for explicit missing-value replacement.

``NaOptions`` is an ordinary Dagster resource, so pipelines can bind it under a
resource key and pass it to the entry points explicitly. Code outside a
pipeline relies on the store below, which is read fresh on every call.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

from dagster import ConfigurableResource
from pydantic import Field

from explicit_na.constants import ENV_EXPLICIT, ENV_VERBOSE, NA_EXPLICIT
from explicit_na.utils.errors import Err, NaError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class NaOptions(ConfigurableResource):
    """Options consulted by ``na_replace`` and ``na_explicit``.

    Attributes:
        explicit: Label used for text/categorical data when no replacement is given.
        verbose: If True, report labels added to categorical data at INFO level.
    """

    explicit: str = Field(default=NA_EXPLICIT)
    verbose: bool = False


_FIELDS = ("explicit", "verbose")
_current: NaOptions | None = None


def _from_env() -> NaOptions:
    explicit = os.environ.get(ENV_EXPLICIT)
    verbose = os.environ.get(ENV_VERBOSE, "")
    return NaOptions(
        explicit=explicit if explicit is not None else NA_EXPLICIT,
        verbose=verbose.strip().lower() in _TRUTHY,
    )


def get_options() -> NaOptions:
    """Return the options set for this process, else the environment defaults."""
    if _current is not None:
        return _current
    return _from_env()


def _merge(base: NaOptions, changes: dict[str, Any]) -> NaOptions:
    unknown = sorted(set(changes) - set(_FIELDS))
    if unknown:
        raise NaError(Err.INVALID_CONFIG, ctx={"unknown": unknown, "allowed": list(_FIELDS)})
    values = {name: getattr(base, name) for name in _FIELDS}
    values.update(changes)
    return NaOptions(**values)


def set_options(**changes: Any) -> NaOptions:
    """Update the process-wide options; returns the options in effect before."""
    global _current
    previous = get_options()
    _current = _merge(previous, changes)
    return previous


def reset_options() -> None:
    """Drop explicitly set options so the environment is consulted again."""
    global _current
    _current = None


@contextmanager
def option_context(**changes: Any) -> Iterator[NaOptions]:
    global _current
    saved = _current
    _current = _merge(get_options(), changes)
    try:
        yield _current
    finally:
        _current = saved


__all__ = ["NaOptions", "get_options", "set_options", "reset_options", "option_context"]
