from collections import Counter
from typing import List, Tuple

from .alphabet import normalize_text


def count_cipher_frequencies(text: str) -> List[Tuple[str, int]]:
    """
    Counts the frequencies of alphabetic characters in text (ignoring case).
    Returns a list of tuples sorted by descending frequency.
    """
    return Counter(normalize_text(text)).most_common()


def index_of_coincidence(text: str) -> float:
    """
    Probability that two letters drawn from the text are equal.
    Around 0.066 for English or any monoalphabetic substitution of it,
    closer to 0.038 for well-mixed polyalphabetic output.
    """
    s = normalize_text(text)
    n = len(s)
    if n < 2:
        return 0.0
    counts = Counter(s)
    return sum(c * (c - 1) for c in counts.values()) / (n * (n - 1))
