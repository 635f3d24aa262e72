"""
Playfair cipher on a 5x5 key square (I and J share one cell).

    square = build_matrix("PLAYFAIR EXAMPLE")
    P L A Y F
    I R E X M
    B C D G H
    K N O Q S
    T U V W Z
"""
from typing import List, Tuple

from .alphabet import normalize_text
from .errors import EmptyKeyError, EmptyTextError, LengthMismatchError

PLAYFAIR_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # no J
SIZE = 5
FILLER = 'X'

Square = List[List[str]]


def normalize_key(key: str) -> str:
    return normalize_text(key).replace('J', 'I')


def build_matrix(key: str) -> Square:
    # key letters first (first occurrence only), then the rest of the alphabet
    filtered = []
    for ch in normalize_key(key) + PLAYFAIR_ALPHABET:
        if ch not in filtered:
            filtered.append(ch)
    return [filtered[i*SIZE:(i+1)*SIZE] for i in range(SIZE)]


def find_position(square: Square, ch: str) -> Tuple[int, int]:
    for r in range(SIZE):
        for c in range(SIZE):
            if square[r][c] == ch:
                return r, c
    raise ValueError(f"Character {ch} not found in Playfair square")


def prepare_plaintext(text: str) -> str:
    """
    Normalizes the text, maps J to I, puts the filler letter between
    two identical consecutive letters and pads an odd length with it.
    """
    cleaned = normalize_key(text)
    prepared = []
    for i, ch in enumerate(cleaned):
        prepared.append(ch)
        if i + 1 < len(cleaned) and cleaned[i+1] == ch:
            prepared.append(FILLER)
    if len(prepared) % 2 != 0:
        prepared.append(FILLER)
    return ''.join(prepared)


def _substitute(square: Square, text: str, step: int) -> str:
    # step=+1 encrypts, step=-1 decrypts
    out = []
    for i in range(0, len(text), 2):
        r1, c1 = find_position(square, text[i])
        r2, c2 = find_position(square, text[i+1])
        if r1 == r2:
            # same row -> right / left
            out.append(square[r1][(c1 + step) % SIZE])
            out.append(square[r2][(c2 + step) % SIZE])
        elif c1 == c2:
            # same column -> below / above
            out.append(square[(r1 + step) % SIZE][c1])
            out.append(square[(r2 + step) % SIZE][c2])
        else:
            # rectangle
            out.append(square[r1][c2])
            out.append(square[r2][c1])
    return ''.join(out)


def _check_key(key: str) -> None:
    if not normalize_key(key):
        raise EmptyKeyError()


def _encrypt_with_square(square: Square, text: str) -> str:
    prepared = prepare_plaintext(text)
    if not prepared:
        raise EmptyTextError()
    return _substitute(square, prepared, 1)


def _decrypt_with_square(square: Square, text: str) -> str:
    cleaned = normalize_key(text)
    if not cleaned:
        raise EmptyTextError()
    if len(cleaned) % 2 != 0:
        raise LengthMismatchError("Playfair ciphertext length must be even.")
    return _substitute(square, cleaned, -1)


def playfair_encrypt(text: str, key: str) -> str:
    _check_key(key)
    return _encrypt_with_square(build_matrix(key), text)


def playfair_decrypt(text: str, key: str) -> str:
    _check_key(key)
    return _decrypt_with_square(build_matrix(key), text)


class PlayfairCipher:
    """
    Playfair bound to one key. The square is built on first use and
    rebuilt only when the key is reassigned.
    """

    def __init__(self, key: str):
        self.key = key

    @property
    def key(self) -> str:
        return self._key

    @key.setter
    def key(self, value: str) -> None:
        _check_key(value)
        self._key = value
        self._square = None

    @property
    def matrix(self) -> Square:
        if self._square is None:
            self._square = build_matrix(self._key)
        return self._square

    def encrypt(self, text: str) -> str:
        return _encrypt_with_square(self.matrix, text)

    def decrypt(self, text: str) -> str:
        return _decrypt_with_square(self.matrix, text)
