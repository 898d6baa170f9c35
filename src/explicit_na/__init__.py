"""Replace missing values without changing a sequence's type or length."""

from .config.options import NaOptions, get_options, option_context, reset_options, set_options
from .constants import NA_EXPLICIT
from .replacement import na_explicit, na_replace
from .types import Kind
from .utils.errors import (
    CardinalityError,
    Err,
    MissingReplacementError,
    NaError,
    TypeCoercionError,
    UnsupportedStructureError,
)
from .utils.missing import all_missing, any_missing, is_missing, which_missing

__all__ = [
    "CardinalityError",
    "Err",
    "Kind",
    "MissingReplacementError",
    "NA_EXPLICIT",
    "NaError",
    "NaOptions",
    "TypeCoercionError",
    "UnsupportedStructureError",
    "all_missing",
    "any_missing",
    "get_options",
    "is_missing",
    "na_explicit",
    "na_replace",
    "option_context",
    "reset_options",
    "set_options",
    "which_missing",
]
