from __future__ import annotations

import math
import random
from numbers import Real
from typing import Any

from py_linvec.vector._base import BaseVector

__all__ = ('VectorReal',)


class VectorReal(BaseVector[float]):
    """Dense vector over real (float) scalars.

    Examples:
        ```python
        v1 = VectorReal([1.0, 2.4, 3.2])
        v2 = VectorReal([2.0, 1.0, 1.0])

        v1 * v2       # 7.6, dot product
        v1 + v2       # VectorReal([3.0, 3.4, 4.2])
        v1 * 2.1      # scaled copy
        v1.length()   # Euclidean norm
        ```
    """

    __slots__ = ()

    ZERO = 0.0
    _scalar_type = float

    @classmethod
    def _coerce(cls, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"VectorReal elements must be real numbers, got {value!r}")
        return float(value)

    @classmethod
    def _sample(cls, rng: random.Random, min_value: float, max_value: float) -> float:
        return rng.uniform(min_value, max_value)

    def _check_scalar(self, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"VectorReal can only be scaled by real numbers, got {value!r}")

    @staticmethod
    def _close(a: float, b: float, eps: float) -> bool:
        return abs(a - b) <= eps

    def dot(self, other: VectorReal) -> float:
        """Calculate the dot product (scalar product) of two vectors.

        Args:
            other: vector of the same dimension.

        Returns:
            Sum of element-wise products. The operation is commutative.

        Raises:
            DimensionMismatch: If the sizes differ.
        """
        self._check_operand(other)
        return math.fsum(a * b for a, b in zip(self._data, other._data))

    def magnitude(self) -> float:
        """Euclidean norm, `sqrt(v . v)`.

        Note:
            Uses math.hypot() for numerical stability with extreme values.
        """
        return math.hypot(*self._data)

    length = magnitude
