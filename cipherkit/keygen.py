"""
Random keys for every cipher, drawn from pycryptodome's CSPRNG.
"""
from typing import Tuple

from Crypto.Random import get_random_bytes, random

from .affine import VALID_A
from .alphabet import ALPHABET, M
from .errors import NonInvertibleMatrixError
from .hill import HILL_SIZES
from .matrix import Matrix, invert_matrix

MAX_TRIES = 1000


def random_letter_key(length: int = 8) -> str:
    if length < 1:
        raise ValueError("Key length must be > 0")
    return ''.join(random.choice(ALPHABET) for _ in range(length))


def random_byte_key(length: int = 16) -> bytes:
    if length < 1:
        raise ValueError("Key length must be > 0")
    return get_random_bytes(length)


def random_affine_key() -> Tuple[int, int]:
    return random.choice(VALID_A), random.randint(0, M - 1)


def random_hill_key(size: int = 2) -> Matrix:
    """
    Draws random size x size matrices until one is invertible mod 26.
    About a third of random 2x2 matrices qualify, so this ends quickly.
    """
    if size not in HILL_SIZES:
        raise ValueError(f"Hill key size must be one of {HILL_SIZES}")
    for _ in range(MAX_TRIES):
        matrix = [[random.randint(0, M - 1) for _ in range(size)] for _ in range(size)]
        try:
            invert_matrix(matrix, M)
        except NonInvertibleMatrixError:
            continue
        return matrix
    raise RuntimeError("Could not find an invertible Hill key")
