"""
End-to-end walkthroughs of the public contract with literal inputs.
"""
import io

import pytest

from snapvector import EuclideanVector, EuclideanVectorError, VectorErrorKind, write_vector


def test_construct_from_sequence():
    a = EuclideanVector.from_iterable([0, -3, 1, 15])
    assert a.get_num_dimensions() == 4
    assert [a[i] for i in range(4)] == [0.0, -3.0, 1.0, 15.0]


def test_equal_vectors_have_equal_unit_vectors():
    a = EuclideanVector(2, 0.0)
    a[0] = 3
    a[1] = 8
    b = EuclideanVector.from_iterable([3, 8])
    assert a == b

    u = a.unit_vector()
    v = b.unit_vector()
    assert u == v
    assert abs(u.euclidean_norm() - 1.0) < 1e-12


def test_compound_add():
    a = EuclideanVector.from_iterable([6, 2])
    b = EuclideanVector(2, 0.0)
    b[0] = 3
    b[1] = -5
    a += b
    assert a.to_list() == [9.0, -3.0]
    assert b.to_list() == [3.0, -5.0]


def test_dot_product():
    a = EuclideanVector.from_iterable([-3, -8, 0])
    b = EuclideanVector.from_iterable([-4, 2, 2])
    assert a * b == -4.0


def test_render():
    sink = io.StringIO()
    write_vector(sink, EuclideanVector.from_iterable([-2.5, 1.3, 0.9]))
    assert sink.getvalue() == "[-2.5 1.3 0.9]"

    empty = EuclideanVector(1)
    empty.move()
    assert str(empty) == "[]"


def test_degenerate_norms_and_units():
    a = EuclideanVector(1)
    b = a.move()
    assert b.get_num_dimensions() == 1

    with pytest.raises(EuclideanVectorError) as exc:
        a.euclidean_norm()
    assert str(exc.value) == "EuclideanVector with no dimensions does not have a norm"

    with pytest.raises(EuclideanVectorError) as exc:
        a.unit_vector()
    assert exc.value.kind is VectorErrorKind.ZERO_DIMENSIONS_UNIT
    assert str(exc.value) == "EuclideanVector with no dimensions does not have a unit vector"

    c = EuclideanVector(2, 0.0)
    with pytest.raises(EuclideanVectorError) as exc:
        c.unit_vector()
    assert str(exc.value) == "EuclideanVector with euclidean normal of 0 does not have a unit vector"


def test_dimension_mismatch():
    a = EuclideanVector.from_iterable([3, 8, 1])
    b = EuclideanVector(1, 4.0)
    with pytest.raises(EuclideanVectorError) as exc:
        a + b
    assert str(exc.value) == "Dimensions of LHS(3) and RHS(1) do not match"
