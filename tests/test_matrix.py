import pytest

from cipherkit.errors import NonInvertibleMatrixError
from cipherkit.matrix import (adjugate, determinant, invert_matrix, minor, multiply,
                              multiply_vector, transpose)

KEY3 = [[6, 24, 1], [13, 16, 10], [20, 17, 15]]


def test_multiply_shapes():
    assert multiply([[1, 2], [3, 4]], [[5], [6]]) == [[17], [39]]
    assert multiply([[1, 2, 3]], [[1], [1], [1]]) == [[6]]


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_multiply_vector():
    assert multiply_vector([[3, 3], [2, 5]], [7, 4], 26) == [7, 8]


def test_transpose_and_minor():
    assert transpose([[1, 2], [3, 4]]) == [[1, 3], [2, 4]]
    assert minor(KEY3, 0, 1) == [[13, 10], [20, 15]]


def test_determinant():
    assert determinant([[1, 2], [3, 4]]) == -2
    assert determinant([[7]]) == 7
    assert determinant(KEY3) == 441


def test_adjugate_2x2():
    assert adjugate([[1, 2], [3, 4]]) == [[4, -2], [-3, 1]]


def test_adjugate_times_matrix_is_det_identity():
    det = determinant(KEY3)
    assert multiply(KEY3, adjugate(KEY3)) == [[det, 0, 0], [0, det, 0], [0, 0, det]]


def test_invert_matrix_2x2():
    assert invert_matrix([[3, 3], [2, 5]]) == [[15, 17], [20, 9]]


@pytest.mark.parametrize("key", [[[3, 3], [2, 5]], KEY3])
def test_invert_matrix_gives_identity_mod_26(key):
    product = multiply(key, invert_matrix(key))
    n = len(key)
    assert [[v % 26 for v in row] for row in product] == \
        [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def test_invert_matrix_not_invertible():
    with pytest.raises(NonInvertibleMatrixError):
        invert_matrix([[1, 2], [3, 4]])
