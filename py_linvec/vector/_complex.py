from __future__ import annotations

import math
import random
from numbers import Complex
from typing import Any

from py_linvec.vector._base import BaseVector

__all__ = ('VectorComplex',)


class VectorComplex(BaseVector[complex]):
    """Dense vector over complex scalars with Hermitian semantics.

    Differs from VectorReal in three places:

    - `dot()` conjugates the first operand, so `a.dot(b) == b.dot(a).conjugate()`
      and the product is not commutative.
    - `norm()` is `sqrt(sum(x * conj(x)))`, always a real value.
    - equality tests real and imaginary parts separately against the tolerance.

    Elements may be given as complex numbers, real numbers or `(real, imag)` pairs.

    Examples:
        ```python
        cv1 = VectorComplex([(1, 2), (3, 4)])
        cv2 = VectorComplex([1 + 1j, 3])

        cv1 * cv2         # (12-13j)
        cv1.norm()        # sqrt(30)
        cv1.normalize()   # unit norm, divided by the real norm
        ```
    """

    __slots__ = ()

    ZERO = 0j
    _scalar_type = complex

    @classmethod
    def _coerce(cls, value: Any) -> complex:
        if isinstance(value, tuple) and len(value) == 2:
            return complex(*value)
        if isinstance(value, bool) or not isinstance(value, Complex):
            raise TypeError(f"VectorComplex elements must be complex numbers, got {value!r}")
        return complex(value)

    @classmethod
    def _sample(cls, rng: random.Random, min_value: float, max_value: float) -> complex:
        # real and imaginary parts are drawn independently
        real = rng.uniform(min_value, max_value)
        imag = rng.uniform(min_value, max_value)
        return complex(real, imag)

    def _check_scalar(self, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, Complex):
            raise TypeError(f"VectorComplex can only be scaled by numbers, got {value!r}")

    @staticmethod
    def _close(a: complex, b: complex, eps: float) -> bool:
        return abs(a.real - b.real) <= eps and abs(a.imag - b.imag) <= eps

    def dot(self, other: VectorComplex) -> complex:
        """Hermitian inner product `sum(conj(self[i]) * other[i])`.

        Args:
            other: vector of the same dimension.

        Returns:
            Complex scalar. Swapping the operands conjugates the result.

        Raises:
            DimensionMismatch: If the sizes differ.

        Examples:
            ```python
            cv1 = VectorComplex([1 + 2j, 3 + 4j])
            cv2 = VectorComplex([1 + 1j, 3 + 0j])
            cv1.dot(cv2)  # (1-2j)(1+1j) + (3-4j)(3) = (12-13j)
            ```
        """
        self._check_operand(other)
        return sum((a.conjugate() * b for a, b in zip(self._data, other._data)), 0j)

    def norm(self) -> float:
        """Real magnitude `sqrt(sum(x * conj(x)))`."""
        total = sum((a * a.conjugate() for a in self._data), 0j)
        return math.sqrt(abs(total))

    magnitude = norm

    def conjugate(self) -> VectorComplex:
        return self._from_list([a.conjugate() for a in self._data])
