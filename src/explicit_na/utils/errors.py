from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Err(Enum):
    UNSUPPORTED_STRUCTURE = auto()
    CARDINALITY = auto()
    TYPE_COERCION = auto()
    MISSING_REPLACEMENT = auto()
    INVALID_CONFIG = auto()


@dataclass(eq=False)
class NaError(Exception):
    code: Err
    ctx: dict[str, Any] | None = None
    cause: Exception | None = None

    def __post_init__(self) -> None:
        if self.ctx is None:
            self.ctx = {}
        if self.cause is not None:
            self.__cause__ = self.cause
        super().__init__(self.code.name)

    def __str__(self) -> str:  # pragma: no cover - convenience for logging
        parts = [self.code.name]
        if self.ctx:
            parts.append(str(self.ctx))
        return ": ".join(parts)


class UnsupportedStructureError(NaError, TypeError):
    """Input is not a flat, homogeneous sequence."""

    def __init__(self, ctx: dict[str, Any] | None = None, cause: Exception | None = None) -> None:
        super().__init__(Err.UNSUPPORTED_STRUCTURE, ctx, cause)


class CardinalityError(NaError, ValueError):
    """Replacement length is neither 1 nor the length of the sequence."""

    def __init__(self, ctx: dict[str, Any] | None = None, cause: Exception | None = None) -> None:
        super().__init__(Err.CARDINALITY, ctx, cause)


class TypeCoercionError(NaError, TypeError):
    """Replacement values cannot be represented in the sequence's kind."""

    def __init__(self, ctx: dict[str, Any] | None = None, cause: Exception | None = None) -> None:
        super().__init__(Err.TYPE_COERCION, ctx, cause)


class MissingReplacementError(NaError, ValueError):
    """No replacement value was given and the kind has no safe default."""

    def __init__(self, ctx: dict[str, Any] | None = None, cause: Exception | None = None) -> None:
        super().__init__(Err.MISSING_REPLACEMENT, ctx, cause)
