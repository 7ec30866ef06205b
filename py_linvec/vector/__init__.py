"""Dense fixed-size vectors over real and complex scalars.

Two variants share the BaseVector contract and differ only in the scalar field:

- VectorReal: plain inner product, `length()` via the Euclidean norm.
- VectorComplex: Hermitian inner product (first operand conjugated), `norm()`
  via `sqrt(sum(x * conj(x)))`.

`make_vector()` picks the variant from the element types.
"""
from numbers import Complex, Real
from typing import Any, Iterable, Union

from py_linvec.vector._base import BaseVector
from py_linvec.vector._complex import VectorComplex
from py_linvec.vector._real import VectorReal

__all__ = ('BaseVector', 'VectorReal', 'VectorComplex', 'make_vector')


def _is_complex_element(value: Any) -> bool:
    if isinstance(value, tuple):
        return True
    return isinstance(value, Complex) and not isinstance(value, Real)


def make_vector(values: Iterable[Any]) -> Union[VectorReal, VectorComplex]:
    """Create a vector whose variant is selected by its element types.

    Args:
        values: real numbers, complex numbers or `(real, imag)` pairs.

    Returns:
        VectorComplex when any element is complex or a pair, otherwise VectorReal.

    Examples:
        ```python
        make_vector([1.0, 2.0])      # VectorReal([1.0, 2.0])
        make_vector([1.0, 2 + 1j])   # VectorComplex([(1+0j), (2+1j)])
        ```
    """
    data = list(values)
    if any(_is_complex_element(v) for v in data):
        return VectorComplex(data)
    return VectorReal(data)
