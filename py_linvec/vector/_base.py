"""Shared contract of dense fixed-size vectors.

BaseVector owns a private Python list of scalars and implements everything that
does not depend on the scalar field: construction, bounds-checked indexing,
element-wise addition and subtraction, scaling, division, epsilon-tolerant
comparison, normalization and formatting. Concrete variants supply the field
specific pieces: element coercion, random sampling, the inner product, the
magnitude and the per-element tolerance test.
"""
from __future__ import annotations

import itertools
import operator
import random
from abc import ABC, abstractmethod
from numbers import Number, Real
from typing import Any, ClassVar, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from typing_extensions import Self

from py_linvec.exceptions import DimensionMismatch, IndexOutOfRange, InvalidArgument
from py_linvec.settings import Settings

__all__ = ('BaseVector',)

T = TypeVar('T')


class BaseVector(ABC, Generic[T]):
    """Dense fixed-size vector with exclusively owned storage.

    The dimension is fixed at construction; elements may be reassigned through
    `set()` or item assignment but never added or removed. Every constructor and
    every arithmetic result builds a fresh backing list, so no two instances
    ever share storage.

    Attributes:
        ZERO: additive identity of the scalar field, used by `filled()`.
        _scalar_type: element type; vectors of different scalar types never mix.
    """

    __slots__ = ('_data',)
    __hash__ = None  # type: ignore[assignment]

    ZERO: ClassVar[Any]
    _scalar_type: ClassVar[type]

    def __init__(self, values: Iterable[Any] = ()):
        self._data: List[T] = [self._coerce(v) for v in values]

    # Field specific hooks

    @classmethod
    @abstractmethod
    def _coerce(cls, value: Any) -> T:
        """Convert an incoming element to the scalar type or raise TypeError."""

    @classmethod
    @abstractmethod
    def _sample(cls, rng: random.Random, min_value: float, max_value: float) -> T:
        """Draw one random element."""

    @abstractmethod
    def _check_scalar(self, value: Any) -> None:
        """Raise TypeError when value cannot scale this vector."""

    @staticmethod
    @abstractmethod
    def _close(a: T, b: T, eps: float) -> bool:
        """Tolerance test for a single pair of elements."""

    @abstractmethod
    def dot(self, other: Self) -> T:
        """Inner product with other vector of the same dimension."""

    @abstractmethod
    def magnitude(self) -> float:
        """Non-negative Euclidean magnitude."""

    # Construction

    @classmethod
    def _from_list(cls, data: List[T]) -> Self:
        # data must already hold coerced scalars and must not be referenced elsewhere
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    @staticmethod
    def _check_dimension(n: int) -> int:
        n = operator.index(n)
        if n < 0:
            raise InvalidArgument("Vector size must be non-negative", n)
        return n

    @classmethod
    def from_sequence(cls, values: Iterable[Any], n: int) -> Self:
        """Create a vector from the first `n` elements of `values`.

        Args:
            values: source elements, at least `n` of them.
            n: dimension of the new vector.

        Returns:
            New vector holding copies of the first `n` elements.

        Raises:
            InvalidArgument: If `n` is negative.
            DimensionMismatch: If `values` holds fewer than `n` elements.

        Examples:
            ```python
            v = VectorReal.from_sequence([1.0, 2.4, 3.2, 9.9], 3)
            v.size()  # 3
            ```
        """
        n = cls._check_dimension(n)
        head = list(itertools.islice(values, n))
        if len(head) < n:
            raise DimensionMismatch(n, len(head), "Source sequence is shorter than the requested size")
        return cls(head)

    @classmethod
    def filled(cls, n: int, value: Optional[Any] = None) -> Self:
        """Create a vector of `n` copies of `value` (the field zero by default)."""
        n = cls._check_dimension(n)
        fill = cls._coerce(cls.ZERO if value is None else value)
        return cls._from_list([fill] * n)

    @classmethod
    def random(cls, n: int, min_value: float, max_value: float, seed: Optional[int] = None) -> Self:
        """Create a vector of independent uniform samples in `[min_value, max_value]`.

        Each call draws from its own generator, seeded from operating system
        entropy unless `seed` is given, so results are not reproducible across
        calls by default and no generator state is shared between vectors.

        Args:
            n: dimension of the new vector.
            min_value: lower bound of every sample.
            max_value: upper bound of every sample.
            seed: optional seed for a reproducible draw.

        Raises:
            InvalidArgument: If `n` is negative or `min_value > max_value`.

        Examples:
            ```python
            noise = VectorReal.random(3, -5.0, 5.0)
            fixed = VectorComplex.random(2, 0.0, 1.0, seed=42)
            ```
        """
        n = cls._check_dimension(n)
        for bound in (min_value, max_value):
            if isinstance(bound, bool) or not isinstance(bound, Real):
                raise TypeError(f"Random bounds must be real numbers, got {bound!r}")
        if min_value > max_value:
            raise InvalidArgument("min_value must not exceed max_value", (min_value, max_value))
        rng = random.Random(seed)
        return cls._from_list([cls._sample(rng, min_value, max_value) for _ in range(n)])

    def copy(self) -> Self:
        """Independent copy; mutating either vector leaves the other unchanged."""
        return self._from_list(list(self._data))

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    # Element access

    def size(self) -> int:
        return len(self._data)

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._data):
            raise IndexOutOfRange(index, len(self._data))
        return index

    def get(self, index: int) -> T:
        """
        Args:
            index: position in `0 <= index < size()`
        Returns:
            element at index
        Raises:
            IndexOutOfRange: for any other index
        """
        return self._data[self._check_index(index)]

    def set(self, index: int, value: Any) -> None:
        """
        Args:
            index: position in `0 <= index < size()`
            value: new element, coerced to the scalar type
        Raises:
            IndexOutOfRange: for any other index
        """
        i = self._check_index(index)
        self._data[i] = self._coerce(value)

    def to_list(self) -> List[T]:
        return list(self._data)

    # Arithmetic

    def _check_operand(self, other: Any) -> None:
        if not isinstance(other, BaseVector) or other._scalar_type is not self._scalar_type:
            raise TypeError(f"Expected {type(self).__name__}, got {type(other).__name__}")
        if len(other._data) != len(self._data):
            raise DimensionMismatch(len(self._data), len(other._data))

    def add(self, other: Self) -> Self:
        """Element-wise sum.

        Raises:
            DimensionMismatch: If the sizes differ.
        """
        self._check_operand(other)
        return self._from_list([a + b for a, b in zip(self._data, other._data)])

    def subtract(self, other: Self) -> Self:
        """Element-wise difference `self - other`.

        Raises:
            DimensionMismatch: If the sizes differ.
        """
        self._check_operand(other)
        return self._from_list([a - b for a, b in zip(self._data, other._data)])

    def scale(self, value: Any) -> Self:
        """Multiply every element by a scalar; `v * s` and `s * v` delegate here."""
        self._check_scalar(value)
        return self._from_list([a * value for a in self._data])

    def _check_divisor(self, value: Any) -> None:
        self._check_scalar(value)
        if abs(value) < Settings.EPS:
            raise InvalidArgument(InvalidArgument.ZERO_DIVISOR, value)

    def divide(self, value: Any) -> Self:
        """Divide every element by a scalar.

        Raises:
            InvalidArgument: If `abs(value)` is below `Settings.EPS`.
        """
        self._check_divisor(value)
        return self._from_list([a / value for a in self._data])

    def negate(self) -> Self:
        return self._from_list([-a for a in self._data])

    def normalize(self) -> Self:
        """Create a unit vector pointing in the same direction.

        The receiver is not modified.

        Returns:
            New vector with every element divided by `magnitude()`.

        Raises:
            InvalidArgument: If the magnitude is below `Settings.EPS`.

        Examples:
            ```python
            VectorReal([3.0, 4.0]).normalize()  # VectorReal([0.6, 0.8])
            VectorReal([0.0, 0.0]).normalize()  # raises InvalidArgument
            ```
        """
        m = self.magnitude()
        if m < Settings.EPS:
            raise InvalidArgument(InvalidArgument.ZERO_VECTOR, m)
        return self._from_list([a / m for a in self._data])

    # Comparison

    def equals(self, other: BaseVector[Any]) -> bool:
        """Epsilon-tolerant equality: same variant, same size, every element pair within `Settings.EPS`."""
        if not isinstance(other, BaseVector):
            return False
        if other._scalar_type is not self._scalar_type or len(other._data) != len(self._data):
            return False
        eps = Settings.EPS
        return all(self._close(a, b, eps) for a, b in zip(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, BaseVector):
            return NotImplemented
        return not self.equals(other)

    # Formatting

    def __str__(self) -> str:
        return "{ " + "".join(f"{a} " for a in self._data) + "}"

    def format(self) -> str:
        """Diagnostic listing `{ e0 e1 ... }` followed by a newline."""
        return f"{self}\n"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    # Operator overloads

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: Any) -> None:
        self.set(index, value)

    def __add__(self, other: Self) -> Self:
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        return self.subtract(other)

    def __neg__(self) -> Self:
        return self.negate()

    def __mul__(self, other: Union[Number, Self]) -> Union[T, Self]:
        if isinstance(other, BaseVector):
            return self.dot(other)
        if isinstance(other, Number):
            return self.scale(other)
        raise TypeError(other)

    def __rmul__(self, other: Number) -> Self:
        if isinstance(other, Number):
            return self.scale(other)
        raise TypeError(other)

    def __truediv__(self, other: Number) -> Self:
        if isinstance(other, Number):
            return self.divide(other)
        raise TypeError(other)

    # In-place operators validate first and only then touch the storage

    def __iadd__(self, other: Self) -> Self:
        self._check_operand(other)
        for i, b in enumerate(other._data):
            self._data[i] += b
        return self

    def __isub__(self, other: Self) -> Self:
        self._check_operand(other)
        for i, b in enumerate(other._data):
            self._data[i] -= b
        return self

    def __imul__(self, other: Number) -> Self:
        if not isinstance(other, Number):
            raise TypeError(other)
        self._check_scalar(other)
        for i, a in enumerate(self._data):
            self._data[i] = a * other
        return self

    def __itruediv__(self, other: Number) -> Self:
        if not isinstance(other, Number):
            raise TypeError(other)
        self._check_divisor(other)
        for i, a in enumerate(self._data):
            self._data[i] = a / other
        return self
