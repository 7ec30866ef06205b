"""py_linvec exception types.

Exception Hierarchy
-------------------

Exception (built-in Python)
├── IndexError
│   └── IndexOutOfRange
└── ValueError
    └── VectorError
        ├── IndexOutOfRange
        ├── DimensionMismatch
        └── InvalidArgument

Exception Types
---------------

- VectorError: Base class for all library errors, typically not raised directly.

- IndexOutOfRange: Raised when reading or writing an element outside `0 <= index < size`.
  Contains:
  - index: The rejected index
  - size: Dimension of the vector

- DimensionMismatch: Raised when two operands required to share a dimension do not.
  Contains:
  - expected: Dimension of the receiver
  - actual: Dimension of the other operand

- InvalidArgument: Raised on division by a near-zero scalar or normalization of a near-zero vector.
  Contains:
  - value: The offending scalar or magnitude
  - reason: Enumerated reason:
    - ZERO_DIVISOR: Divisor magnitude below tolerance
    - ZERO_VECTOR: Vector magnitude below tolerance
"""
from __future__ import annotations

from typing import Any

__all__ = (
    'VectorError',
    'IndexOutOfRange',
    'DimensionMismatch',
    'InvalidArgument',
)


class VectorError(ValueError):
    """Vector error."""


class IndexOutOfRange(VectorError, IndexError):
    """Exception for element access outside the vector bounds."""

    def __init__(self, index: int, size: int):
        self.index: int = index
        self.size: int = size
        super().__init__(f'Invalid index {index} for vector of size {size}')


class DimensionMismatch(VectorError):
    """Exception for operands of unequal dimension.

    Contains:
    - The dimension of the receiver
    - The dimension of the other operand
    """

    def __init__(self, expected: int, actual: int, note: str = ""):
        self.expected: int = expected
        self.actual: int = actual
        msg = f'Unequal lengths: {expected} != {actual}'
        if note:
            msg += f". {note}"
        super().__init__(msg)


class InvalidArgument(VectorError):
    """Exception for arguments rejected by the tolerance checks.

    Contains:
    - The offending value
    - The reason
    """

    ZERO_DIVISOR = "The denominator must not be equal to 0"
    ZERO_VECTOR = "Cannot normalize zero vector"

    def __init__(self, reason: str, value: Any = None):
        self.reason: str = reason
        self.value: Any = value
        msg = reason
        if value is not None:
            msg += f" (got {value!r})"
        super().__init__(msg)
