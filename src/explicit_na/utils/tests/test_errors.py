import pytest

from explicit_na.utils.errors import (
    CardinalityError,
    Err,
    MissingReplacementError,
    NaError,
    TypeCoercionError,
    UnsupportedStructureError,
)


@pytest.mark.parametrize(
    "cls, code, builtin",
    [
        (UnsupportedStructureError, Err.UNSUPPORTED_STRUCTURE, TypeError),
        (CardinalityError, Err.CARDINALITY, ValueError),
        (TypeCoercionError, Err.TYPE_COERCION, TypeError),
        (MissingReplacementError, Err.MISSING_REPLACEMENT, ValueError),
    ],
)
def test_subclasses_carry_fixed_code(cls, code, builtin):
    err = cls(ctx={"k": 1})
    assert isinstance(err, NaError)
    assert isinstance(err, builtin)
    assert err.code is code
    assert err.ctx == {"k": 1}


def test_cause_is_chained():
    cause = RuntimeError("boom")
    err = NaError(Err.INVALID_CONFIG, cause=cause)
    assert err.__cause__ is cause
    assert err.ctx == {}
