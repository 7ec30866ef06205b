"""Angle bisector of two vectors.

Works with any vector type offering `size()`, `normalize()` and `add()`, so the
same function serves VectorReal and VectorComplex.
"""
from typing import TypeVar

from typing_extensions import Protocol, Self

from py_linvec.exceptions import DimensionMismatch

__all__ = ('SupportsBisector', 'bisector')


class SupportsBisector(Protocol):
    def size(self) -> int: ...

    def normalize(self) -> Self: ...

    def add(self, other: Self) -> Self: ...


_V = TypeVar('_V', bound=SupportsBisector)


def bisector(a: _V, b: _V) -> _V:
    """Direction bisecting the angle between two vectors.

    Args:
        a: first vector.
        b: second vector of the same dimension and variant.

    Returns:
        `a.normalize() + b.normalize()`.

    Raises:
        DimensionMismatch: If the sizes differ.
        InvalidArgument: If either vector is near zero (raised by `normalize()`).

    Examples:
        ```python
        v1 = VectorReal([1.0, 2.4, 3.2])
        v2 = VectorReal([2.0, 1.0, 1.0])
        bisector(v1, v2)

        v = VectorReal([3.0, 4.0])
        bisector(v, v)  # VectorReal([1.2, 1.6]), length 2
        ```
    """
    if a.size() != b.size():
        raise DimensionMismatch(a.size(), b.size(), "Vectors must have the same dimension")
    return a.normalize().add(b.normalize())
