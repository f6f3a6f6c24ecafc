import copy
from fractions import Fraction

import numpy as np
import pytest

from linfft.errors import DimensionMismatchError
from linfft.matrix import Matrix


def build_rect() -> Matrix:
    return Matrix.from_rows([[1, 2, 3], [4, 5, 6]], float)


def test_construct_defaults_and_fill():
    zeros = Matrix(2, 3)
    assert zeros.shape == (2, 3)
    assert all(zeros.at(i, j) == 0.0 for i in range(2) for j in range(3))
    sevens = Matrix(3, 2, 7, int)
    assert sevens.tolist() == [[7, 7], [7, 7], [7, 7]]
    assert Matrix(2, 2, dtype=Fraction).at(1, 1) == Fraction(0)


def test_empty_matrix_dimensions():
    empty = Matrix(0, 0)
    assert empty.rows() == 0
    assert empty.columns() == 0
    assert Matrix.from_rows([]).shape == (0, 0)


def test_negative_dimensions_rejected():
    with pytest.raises(DimensionMismatchError):
        Matrix(-1, 2)


def test_ragged_rows_rejected():
    with pytest.raises(DimensionMismatchError) as info:
        Matrix.from_rows([[1, 2], [3]])
    assert info.value.expected == 2
    assert info.value.actual == 1


def test_identity():
    eye = Matrix.identity(3)
    assert eye.tolist() == [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]]
    assert Matrix.identity(0).shape == (0, 0)


def test_copies_do_not_alias():
    original = build_rect()
    duplicate = original.copy()
    duplicate[0, 0] = 100.0
    assert original.at(0, 0) == 1.0
    deep = copy.deepcopy(original)
    deep.set(1, 2, -1.0)
    assert original.at(1, 2) == 6.0
    shallow = copy.copy(original)
    shallow[1, 1] = 0.0
    assert original[1, 1] == 5.0


def test_from_rows_copies_input():
    rows = [[1.0, 2.0], [3.0, 4.0]]
    m = Matrix.from_rows(rows)
    rows[0][0] = 9.0
    assert m.at(0, 0) == 1.0


def test_copy_with_dtype_conversion():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert m.dtype is int
    converted = m.copy(Fraction)
    assert converted.dtype is Fraction
    assert isinstance(converted.at(0, 1), Fraction)


def test_add_subtract_negate_scale():
    a = build_rect()
    b = Matrix(2, 3, 1.0)
    assert a.add(b).tolist() == [[2, 3, 4], [5, 6, 7]]
    assert (a - b).tolist() == [[0, 1, 2], [3, 4, 5]]
    assert a.subtract(b) == a + (-b)
    assert (-a).tolist() == [[-1, -2, -3], [-4, -5, -6]]
    assert a.scale(2).tolist() == [[2, 4, 6], [8, 10, 12]]
    assert 2 * a == a * 2


def test_add_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        build_rect() + Matrix(3, 2)
    with pytest.raises(DimensionMismatchError):
        build_rect().subtract(Matrix(2, 2))


def test_multiply_matches_numpy():
    a = build_rect()
    b = Matrix.from_rows([[1, 0], [2, -1], [0.5, 3]], float)
    product = a.multiply(b)
    assert product.shape == (2, 2)
    assert np.allclose(product.to_numpy(), a.to_numpy() @ b.to_numpy())
    assert (a @ b) == (a * b)


def test_multiply_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        build_rect().multiply(build_rect())


def test_multiply_by_identity():
    a = build_rect()
    assert a * Matrix.identity(3) == a
    assert Matrix.identity(2) * a == a


def test_multiply_is_associative():
    a = Matrix.from_rows([[0.1, 0.2], [0.3, 0.4], [0.5, 0.6]])
    b = Matrix.from_rows([[1.5, -2.0, 0.25], [3.0, 0.5, -1.0]])
    c = Matrix.from_rows([[2.0], [-1.0], [0.75]])
    assert ((a * b) * c).isclose(a * (b * c))


def test_transpose():
    a = build_rect()
    t = a.transpose()
    assert t.shape == (3, 2)
    assert t.tolist() == [[1, 4], [2, 5], [3, 6]]
    assert t.transpose() == a
    t[0, 0] = 42.0
    assert a.at(0, 0) == 1.0


def test_equality_is_exact():
    a = Matrix.from_rows([[0.1 + 0.2]])
    b = Matrix.from_rows([[0.3]])
    assert a != b
    assert not a.equals(b)
    assert a.isclose(b)
    assert Matrix(2, 3) != Matrix(3, 2)
    assert not Matrix(1, 1).equals(Matrix(1, 2))


def test_matrix_is_unhashable():
    with pytest.raises(TypeError):
        hash(Matrix(1, 1))


def test_out_of_range_access_follows_list_indexing():
    with pytest.raises(IndexError):
        Matrix(2, 2).at(2, 0)


def test_render():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert m.render() == "1 2\n3 4\n"
    assert str(Matrix.from_rows([[5]])) == "5\n"
    assert str(Matrix(0, 0)) == ""


def test_repr_round_trips_through_from_rows():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    assert repr(m) == "Matrix.from_rows([[1, 2], [3, 4]])"


def test_to_numpy_shape_for_empty():
    assert Matrix(0, 0).to_numpy().shape == (0, 0)
    assert Matrix.from_rows(np.eye(2)).to_numpy().tolist() == [[1.0, 0.0], [0.0, 1.0]]


def test_rows_without_columns_keep_their_shape():
    m = Matrix(3, 0)
    assert m.shape == (3, 0)
    assert m.transpose().shape == (0, 3)
    assert m.transpose().transpose() == m
    assert m != Matrix(0, 0)
    assert m.copy().shape == (3, 0)
    assert Matrix.from_rows([[], [], []]).shape == (3, 0)
    assert m.to_numpy().shape == (3, 0)


def test_columns_without_rows_keep_their_shape():
    m = Matrix(0, 3)
    assert m.shape == (0, 3)
    assert m.transpose().shape == (3, 0)
    assert m.transpose().transpose() == m
    assert m != Matrix(0, 0)
    assert repr(m) == "Matrix(0, 3)"
    assert m.to_numpy().shape == (0, 3)


def test_product_over_empty_inner_dimension_is_zero():
    product = Matrix(2, 0) * Matrix(0, 3)
    assert product.shape == (2, 3)
    assert product.tolist() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_dtype_follows_arithmetic_results():
    ints = Matrix.from_rows([[1, 2], [3, 4]])
    assert ints.dtype is int
    assert ints.scale(0.5).dtype is float
    assert ints.scale(2).dtype is int
    assert (ints + Matrix(2, 2, 0.5)).dtype is float
    assert (-ints).dtype is int
    assert (ints * Matrix.identity(2, Fraction)).dtype is Fraction
    assert Matrix(0, 0, dtype=Fraction).scale(0.5).dtype is Fraction
