"""
Vigenere family.

- vigenere_*  : C = (P + K) mod 26, key repeated.
- autokey_*   : key stream is the primer followed by the plaintext itself.
- extended_*  : same as Vigenere but over raw bytes, C = (P + K) mod 256.

The letter variants normalize their input (uppercase, letters only) and
return uppercase text; the extended variant takes and returns bytes.
"""
from typing import List, Union

from .alphabet import M, letter_to_number, normalize_text, number_to_letter
from .errors import EmptyKeyError, EmptyTextError

BYTE_MODULUS = 256

BytesLike = Union[bytes, bytearray, str]


def _letter_key(key: str) -> List[int]:
    key = normalize_text(key)
    if not key:
        raise EmptyKeyError("Key must contain alphabetic characters.")
    return [letter_to_number(k) for k in key]


def _letter_text(text: str) -> str:
    text = normalize_text(text)
    if not text:
        raise EmptyTextError()
    return text


# --- 1. Vigenere Cipher ---
def vigenere(text: str, key: str, decrypt: bool = False) -> str:
    key_indices = _letter_key(key)
    text = _letter_text(text)
    result = []
    for j, ch in enumerate(text):
        shift = key_indices[j % len(key_indices)]
        if decrypt:
            shift = -shift
        result.append(number_to_letter(letter_to_number(ch) + shift))
    return ''.join(result)


def vigenere_encrypt(text: str, key: str) -> str:
    return vigenere(text, key)


def vigenere_decrypt(text: str, key: str) -> str:
    return vigenere(text, key, decrypt=True)


# --- 2. Autokey Cipher ---
def autokey_encrypt(text: str, key: str) -> str:
    primer = _letter_key(key)
    text = _letter_text(text)
    # plaintext extends the running key
    running = primer + [letter_to_number(ch) for ch in text]
    return ''.join(number_to_letter(letter_to_number(ch) + running[j])
                   for j, ch in enumerate(text))


def autokey_decrypt(text: str, key: str) -> str:
    running = _letter_key(key)
    text = _letter_text(text)
    recovered = []
    for j, ch in enumerate(text):
        p = (letter_to_number(ch) - running[j]) % M
        recovered.append(number_to_letter(p))
        running.append(p)
    return ''.join(recovered)


# --- 3. Extended Vigenere Cipher (byte-wise) ---
def to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def byte_key(key: BytesLike) -> bytes:
    key = to_bytes(key)
    if not key:
        raise EmptyKeyError()
    return key


def extended_vigenere(data: BytesLike, key: BytesLike, decrypt: bool = False) -> bytes:
    key = byte_key(key)
    data = to_bytes(data)
    if not data:
        raise EmptyTextError()
    sign = -1 if decrypt else 1
    return bytes((b + sign * key[i % len(key)]) % BYTE_MODULUS for i, b in enumerate(data))


def extended_encrypt(data: BytesLike, key: BytesLike) -> bytes:
    return extended_vigenere(data, key)


def extended_decrypt(data: BytesLike, key: BytesLike) -> bytes:
    return extended_vigenere(data, key, decrypt=True)
