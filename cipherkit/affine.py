from .alphabet import ALPHABET, M, letter_to_number, normalize_text, number_to_letter
from .arithmetic import is_coprime, mod_inverse
from .errors import EmptyTextError, NonCoprimeKeyError

VALID_A = tuple(a for a in range(1, M) if is_coprime(a, M))


def check_key(a):
    """
    Raises NonCoprimeKeyError unless gcd(a, 26) == 1; otherwise
    x -> (a * x + b) mod 26 would not be a bijection.
    """
    if not is_coprime(a, M):
        raise NonCoprimeKeyError(
            f"The value of a ({a}) must be coprime with 26 "
            f"(values: {', '.join(str(v) for v in VALID_A)})."
        )


def affine_mapping(a, b):
    """
    Generates a dictionary mapping for the Affine cipher (for uppercase letters).
    For each letter with index x (A=0, B=1, ..., Z=25), compute:
      mapped_index = (a * x + b) mod 26
    """
    return {letter: number_to_letter(a * i + b) for i, letter in enumerate(ALPHABET)}


def affine_encrypt(text, a, b):
    """
    Encrypts the normalized text with E(x) = (a * x + b) mod 26.
    """
    check_key(a)
    text = normalize_text(text)
    if not text:
        raise EmptyTextError()
    mapping = affine_mapping(a, b)
    return ''.join(mapping[ch] for ch in text)


def affine_decrypt(text, a, b):
    """
    Decrypts with D(y) = a_inv * (y - b) mod 26, where a_inv is the
    modular inverse of a.
    """
    check_key(a)
    text = normalize_text(text)
    if not text:
        raise EmptyTextError()
    a_inv = mod_inverse(a, M)
    return ''.join(number_to_letter(a_inv * (letter_to_number(ch) - b)) for ch in text)
