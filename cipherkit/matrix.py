"""
Integer matrix helpers for the Hill cipher.

Matrices are plain lists of row lists. determinant() and adjugate() use
cofactor expansion, which is O(n!) -- fine for the 2x2 and 3x3 keys the
Hill cipher accepts, not meant for anything larger.
"""
from typing import List

from .arithmetic import mod, mod_inverse
from .errors import NoModularInverseError, NonInvertibleMatrixError

Matrix = List[List[int]]


def multiply(matrix_a: Matrix, matrix_b: Matrix) -> Matrix:
    if not matrix_a or not matrix_b:
        raise ValueError("Cannot multiply empty matrices")
    if len(matrix_a[0]) != len(matrix_b):
        raise ValueError(
            f"Shape mismatch: {len(matrix_a)}x{len(matrix_a[0])} "
            f"times {len(matrix_b)}x{len(matrix_b[0])}"
        )
    cols = len(matrix_b[0])
    inner = len(matrix_b)
    return [[sum(row[k] * matrix_b[k][j] for k in range(inner)) for j in range(cols)]
            for row in matrix_a]


def multiply_vector(matrix: Matrix, vec: List[int], modulus: int) -> List[int]:
    n = len(matrix)
    return [sum(matrix[i][j] * vec[j] for j in range(len(vec))) % modulus for i in range(n)]


def transpose(matrix: Matrix) -> Matrix:
    return [list(row) for row in zip(*matrix)]


def minor(matrix: Matrix, row: int, col: int) -> Matrix:
    return [r[:col] + r[col+1:] for i, r in enumerate(matrix) if i != row]


def determinant(matrix: Matrix) -> int:
    # expansion along the first row, not reduced modulo anything
    n = len(matrix)
    if n == 1:
        return matrix[0][0]
    if n == 2:
        return matrix[0][0]*matrix[1][1] - matrix[0][1]*matrix[1][0]
    det = 0
    for c in range(n):
        sign = -1 if (c % 2) else 1
        det += sign * matrix[0][c] * determinant(minor(matrix, 0, c))
    return det


def adjugate(matrix: Matrix) -> Matrix:
    """
    Transpose of the cofactor matrix.
    For [[a, b], [c, d]] this is [[d, -b], [-c, a]].
    """
    n = len(matrix)
    if n == 1:
        return [[1]]
    if n == 2:
        return [[matrix[1][1], -matrix[0][1]],
                [-matrix[1][0], matrix[0][0]]]
    cof = [[0]*n for _ in range(n)]
    for r in range(n):
        for c in range(n):
            sign = -1 if ((r+c) % 2) else 1
            cof[r][c] = sign * determinant(minor(matrix, r, c))
    return transpose(cof)


def invert_matrix(matrix: Matrix, modulus: int = 26) -> Matrix:
    """
    Inverse of a square matrix modulo `modulus`:
        det     = determinant(M) mod m
        inv_det = mod_inverse(det, m)
        M^-1    = inv_det * adjugate(M) mod m
    Raises NonInvertibleMatrixError when det has no inverse modulo m.
    """
    det = mod(determinant(matrix), modulus)
    try:
        inv_det = mod_inverse(det, modulus)
    except NoModularInverseError as exc:
        raise NonInvertibleMatrixError(
            f"The key matrix is not invertible modulo {modulus} "
            f"(determinant {det} shares a factor with {modulus})."
        ) from exc
    adj = adjugate(matrix)
    n = len(matrix)
    return [[mod(inv_det * adj[i][j], modulus) for j in range(n)] for i in range(n)]
