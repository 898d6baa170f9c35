"""Type- and length-preserving replacement of missing values."""

from .dispatch import na_explicit, na_replace
from .specs import GeneratorSpec, ScalarSpec, VectorSpec, as_spec
from .vectors import Vector, as_vector

__all__ = [
    "GeneratorSpec",
    "ScalarSpec",
    "Vector",
    "VectorSpec",
    "as_spec",
    "as_vector",
    "na_explicit",
    "na_replace",
]
