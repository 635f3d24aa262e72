import string
from typing import Iterable, List

from .arithmetic import mod

ALPHABET = string.ascii_uppercase
M = len(ALPHABET)
IDX = {ch: i for i, ch in enumerate(ALPHABET)}


def letter_to_number(letter: str) -> int:
    # A=0, B=1, ..., Z=25
    ch = letter.upper()
    if ch not in IDX:
        raise ValueError(f"Not a letter A-Z: {letter!r}")
    return IDX[ch]


def number_to_letter(num: int) -> str:
    # 0=A, 1=B, ..., wraps modulo 26
    return ALPHABET[mod(num, M)]


def normalize_text(text: str) -> str:
    """
    Uppercases the text and drops everything that is not A-Z.
    The result may be empty.
    """
    return ''.join(ch for ch in text.upper() if ch in IDX)


def to_indices(text: str) -> List[int]:
    return [IDX[ch] for ch in normalize_text(text)]


def from_indices(v: Iterable[int]) -> str:
    return ''.join(number_to_letter(i) for i in v)
