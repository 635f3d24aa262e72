"""
Hill cipher with a 2x2 or 3x3 key matrix K.

The normalized text is cut into blocks of n letters (the last one padded
with 'X' when encrypting); each block is a column vector p and becomes
K . p mod 26. Decryption uses K^-1 mod 26, so it needs det(K) coprime
with 26; encryption works with any key.
"""
import math
from typing import List

from .alphabet import M, from_indices, normalize_text, to_indices
from .errors import EmptyTextError, InvalidMatrixError, LengthMismatchError
from .matrix import Matrix, invert_matrix, multiply_vector

HILL_SIZES = (2, 3)
FILLER = 'X'


def parse_hill_key(key_str: str) -> Matrix:
    # Accept comma/space/semi-colon separated integers, row-major
    parts = key_str.replace(';', ' ').replace(',', ' ').split()
    try:
        nums = [int(p) for p in parts]
    except ValueError:
        raise InvalidMatrixError(f"Hill key must contain integers only: {key_str!r}") from None
    n = math.isqrt(len(nums))
    if n == 0 or n * n != len(nums):
        raise InvalidMatrixError('Hill key length must be a perfect square (n*n integers).')
    return [nums[i*n:(i+1)*n] for i in range(n)]


def check_key_matrix(key_matrix: Matrix) -> int:
    n = len(key_matrix)
    if n not in HILL_SIZES:
        raise InvalidMatrixError(
            f"Hill key matrix must be {' or '.join(f'{s}x{s}' for s in HILL_SIZES)}, got {n} rows."
        )
    if any(len(row) != n for row in key_matrix):
        raise InvalidMatrixError("Hill key matrix must be square.")
    return n


def _apply(matrix: Matrix, letters: str) -> str:
    n = len(matrix)
    indices = to_indices(letters)
    out: List[int] = []
    for i in range(0, len(indices), n):
        out.extend(multiply_vector(matrix, indices[i:i+n], M))
    return from_indices(out)


def hill_encrypt(text: str, key_matrix: Matrix) -> str:
    n = check_key_matrix(key_matrix)
    cleaned = normalize_text(text)
    if not cleaned:
        raise EmptyTextError()
    if len(cleaned) % n != 0:
        cleaned += FILLER * (n - len(cleaned) % n)
    return _apply(key_matrix, cleaned)


def hill_decrypt(text: str, key_matrix: Matrix) -> str:
    n = check_key_matrix(key_matrix)
    cleaned = normalize_text(text)
    if not cleaned:
        raise EmptyTextError()
    inv = invert_matrix(key_matrix, M)
    if len(cleaned) % n != 0:
        raise LengthMismatchError(f"Ciphertext length must be a multiple of matrix size ({n}).")
    return _apply(inv, cleaned)
