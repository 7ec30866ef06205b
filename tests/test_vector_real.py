import copy
import math

import pytest

from py_linvec import (VectorReal, VectorComplex, IndexOutOfRange, DimensionMismatch,
                       InvalidArgument, DEFAULT_EPS)


@pytest.fixture
def v1():
    return VectorReal([1.0, 2.4, 3.2])


@pytest.fixture
def v2():
    return VectorReal([2.0, 1.0, 1.0])


class TestConstruction:

    def test_from_values(self, v1):
        assert v1.size() == 3
        assert len(v1) == 3
        assert v1.to_list() == [1.0, 2.4, 3.2]

    def test_elements_coerced_to_float(self):
        v = VectorReal([1, 2, 3])
        assert all(isinstance(x, float) for x in v)

    def test_rejects_complex_elements(self):
        with pytest.raises(TypeError):
            VectorReal([1.0, 2 + 1j])

    def test_source_not_aliased(self):
        src = [1.0, 2.0]
        v = VectorReal(src)
        src[0] = 9.0
        assert v[0] == 1.0

    def test_from_sequence_takes_first_n(self):
        v = VectorReal.from_sequence([1.0, 2.4, 3.2, 9.9], 3)
        assert v == VectorReal([1.0, 2.4, 3.2])

    def test_from_sequence_short_source(self):
        with pytest.raises(DimensionMismatch) as exc:
            VectorReal.from_sequence([1.0, 2.0], 3)
        assert exc.value.expected == 3
        assert exc.value.actual == 2

    def test_negative_size(self):
        with pytest.raises(InvalidArgument):
            VectorReal.filled(-1)

    def test_filled_default_zero(self):
        v = VectorReal.filled(4)
        assert v.to_list() == [0.0] * 4

    def test_filled_value(self):
        assert VectorReal.filled(3, 2).to_list() == [2.0, 2.0, 2.0]

    def test_filled_empty(self):
        v = VectorReal.filled(0)
        assert v.size() == 0
        assert str(v) == "{ }"

    def test_random_bounds_and_size(self):
        v = VectorReal.random(50, -5.0, 5.0)
        assert v.size() == 50
        assert all(-5.0 <= x <= 5.0 for x in v)

    def test_random_seed_reproducible(self):
        assert VectorReal.random(5, -1.0, 1.0, seed=7) == VectorReal.random(5, -1.0, 1.0, seed=7)

    def test_random_invalid_bounds(self):
        with pytest.raises(InvalidArgument):
            VectorReal.random(3, 5.0, -5.0)


class TestIndexing:

    def test_get_set(self, v1):
        assert v1.get(1) == 2.4
        v1.set(1, 7)
        assert v1[1] == 7.0

    @pytest.mark.parametrize("index", [3, 4, 100, -1])
    def test_out_of_range(self, v1, index):
        with pytest.raises(IndexOutOfRange):
            _ = v1[index]
        with pytest.raises(IndexOutOfRange):
            v1.set(index, 0.0)

    def test_out_of_range_is_index_error(self, v1):
        with pytest.raises(IndexError):
            v1.get(3)

    def test_dimension_invariant(self):
        for n in range(5):
            v = VectorReal.filled(n)
            assert v.size() == n
            with pytest.raises(IndexOutOfRange):
                v.get(n)


class TestCopy:

    @pytest.mark.parametrize("make_copy", [
        lambda v: v.copy(),
        copy.copy,
        copy.deepcopy,
    ])
    def test_isolation(self, v1, make_copy):
        w = make_copy(v1)
        assert w == v1
        w[0] = 10.0
        assert v1[0] == 1.0
        v1[2] = -1.0
        assert w[2] == 3.2


class TestArithmetic:

    def test_dot(self, v1, v2):
        assert v1.dot(v2) == pytest.approx(7.6)
        assert v1 * v2 == pytest.approx(7.6)
        assert v1.dot(v2) == pytest.approx(v2.dot(v1))

    def test_add(self, v1, v2):
        assert v1 + v2 == VectorReal([3.0, 3.4, 4.2])

    def test_subtract(self, v1, v2):
        assert v1 - v2 == VectorReal([-1.0, 1.4, 2.2])

    def test_scale_commutative(self, v1):
        expected = VectorReal([2.1, 5.04, 6.72])
        assert v1 * 2.1 == expected
        assert 2.1 * v1 == expected
        assert v1.scale(2.1) == expected

    def test_negate(self, v1):
        assert -v1 == VectorReal([-1.0, -2.4, -3.2])

    def test_results_are_new_vectors(self, v1, v2):
        result = v1 + v2
        result[0] = 100.0
        assert v1[0] == 1.0
        assert v2[0] == 2.0

    @pytest.mark.parametrize("op", [
        lambda a, b: a + b,
        lambda a, b: a - b,
        lambda a, b: a.dot(b),
    ])
    def test_dimension_mismatch(self, v1, op):
        with pytest.raises(DimensionMismatch):
            op(v1, VectorReal([1.0, 2.0]))

    def test_mixed_variants_rejected(self, v1):
        with pytest.raises(TypeError):
            _ = v1 + VectorComplex([1, 2, 3])

    def test_mul_type_error(self, v1):
        with pytest.raises(TypeError):
            _ = v1 * "x"  # type: ignore[operator]

    def test_scale_by_complex_rejected(self, v1):
        with pytest.raises(TypeError):
            v1.scale(1j)

    @pytest.mark.parametrize("w", [
        VectorReal([0.5, -1.5, 2.0]),
        VectorReal([1e6, -1e-3, 0.0]),
    ])
    def test_add_subtract_inverse(self, v1, w):
        assert (v1 + w) - w == v1

    @pytest.mark.parametrize("s", [2.5, -3.0, 1e-3, DEFAULT_EPS])
    def test_scalar_round_trip(self, v1, s):
        assert (v1 * s) / s == v1

    @pytest.mark.parametrize("s", [0, 0.0, 1e-9, -5e-9])
    def test_divide_by_near_zero(self, v1, s):
        with pytest.raises(InvalidArgument) as exc:
            _ = v1 / s
        assert exc.value.reason == InvalidArgument.ZERO_DIVISOR
        assert v1 == VectorReal([1.0, 2.4, 3.2])


class TestInPlace:

    def test_iadd(self, v1, v2):
        target = v1
        v1 += v2
        assert v1 is target
        assert v1 == VectorReal([3.0, 3.4, 4.2])

    def test_isub_self(self, v1):
        v1 -= v1
        assert v1 == VectorReal.filled(3)

    def test_imul_itruediv(self, v1):
        v1 *= 2
        assert v1 == VectorReal([2.0, 4.8, 6.4])
        v1 /= 2
        assert v1 == VectorReal([1.0, 2.4, 3.2])

    def test_failed_iadd_leaves_receiver(self, v1):
        with pytest.raises(DimensionMismatch):
            v1 += VectorReal([1.0])
        assert v1 == VectorReal([1.0, 2.4, 3.2])

    def test_failed_idiv_leaves_receiver(self, v1):
        with pytest.raises(InvalidArgument):
            v1 /= 0.0
        assert v1 == VectorReal([1.0, 2.4, 3.2])


class TestEquality:

    def test_reflexive(self, v1):
        assert v1 == v1
        assert not (v1 != v1)

    def test_symmetric(self, v1, v2):
        assert (v1 == v2) == (v2 == v1)
        close = VectorReal([1.0 + 5e-9, 2.4, 3.2])
        assert (v1 == close) == (close == v1)

    def test_within_tolerance(self):
        assert VectorReal([1.0, 2.0]) == VectorReal([1.0 + 5e-9, 2.0 - 5e-9])

    def test_outside_tolerance(self):
        assert VectorReal([1.0, 2.0]) != VectorReal([1.0 + 1e-6, 2.0])

    def test_size_differs(self):
        assert VectorReal([1.0, 2.0]) != VectorReal([1.0, 2.0, 0.0])

    def test_other_types(self, v1):
        assert v1 != [1.0, 2.4, 3.2]
        assert VectorReal([1.0]) != VectorComplex([1.0])

    def test_equals_non_vector(self, v1):
        assert v1.equals([1.0, 2.4, 3.2]) is False  # type: ignore[arg-type]
        assert v1.equals(None) is False  # type: ignore[arg-type]

    def test_unhashable(self, v1):
        with pytest.raises(TypeError):
            hash(v1)


class TestLengthAndNormalize:

    def test_length(self):
        v = VectorReal([3.0, -4.0])
        assert v.length() == pytest.approx(5.0)
        assert v.magnitude() == v.length()

    def test_length_non_negative(self):
        assert VectorReal([-1.0, -2.0]).length() > 0
        assert VectorReal([]).length() == 0

    def test_normalize(self, v1):
        n = v1.normalize()
        assert math.fabs(n.length() - 1.0) <= DEFAULT_EPS
        assert v1 == VectorReal([1.0, 2.4, 3.2])

    def test_normalize_values(self):
        assert VectorReal([3.0, 4.0]).normalize() == VectorReal([0.6, 0.8])

    @pytest.mark.parametrize("values", [[0.0, 0.0], [1e-9, 0.0], []])
    def test_normalize_near_zero(self, values):
        with pytest.raises(InvalidArgument) as exc:
            VectorReal(values).normalize()
        assert exc.value.reason == InvalidArgument.ZERO_VECTOR


class TestFormatting:

    def test_str(self):
        assert str(VectorReal([1.0, 2.5])) == "{ 1.0 2.5 }"

    def test_format(self):
        assert VectorReal([1.0, 2.5]).format() == "{ 1.0 2.5 }\n"

    def test_repr(self):
        assert repr(VectorReal([1.0, 2.5])) == "VectorReal([1.0, 2.5])"
