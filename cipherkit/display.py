"""
Text renderings of key material, printed by the CLI with --show.
"""
from typing import List

from .affine import affine_mapping
from .alphabet import ALPHABET, letter_to_number, normalize_text, number_to_letter


def _table(top: List[str], bottom: List[str]) -> str:
    # First row: plain letters, second row: border, third row: cipher letters
    row1 = " ".join(f"{ch:2}" for ch in top)
    row2 = " " + "--" + "+--" * (len(top) - 1) + " "
    row3 = " ".join(f"{ch:2}" for ch in bottom)
    return "\n".join([row1, row2, row3])


def format_matrix(matrix) -> str:
    return "\n".join(" ".join(f"{num:3}" for num in row) for row in matrix)


def format_affine_table(a, b):
    mapping = affine_mapping(a, b)
    return _table(list(ALPHABET), [mapping[ch] for ch in ALPHABET])


def format_vigenere_tables(key):
    """
    One Caesar table per distinct key letter, in key order.
    """
    blocks = []
    seen = set()
    for letter in normalize_text(key):
        if letter in seen:
            continue
        seen.add(letter)
        shift = letter_to_number(letter)
        shifted = [number_to_letter(i + shift) for i in range(len(ALPHABET))]
        blocks.append(f"Mapping for key letter '{letter}':\n" + _table(list(ALPHABET), shifted))
    return "\n\n".join(blocks)


def format_playfair_square(square) -> str:
    return "\n".join(" ".join(row) for row in square)
