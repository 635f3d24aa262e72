"""
Super encryption: Extended Vigenere followed by columnar transposition.

    encrypt: transpose(extended_encrypt(data, key), columns)
    decrypt: extended_decrypt(inverse_transpose(data, columns), key)
"""
from .errors import EmptyTextError
from .transposition import inverse_transpose, transpose
from .vigenere import BytesLike, byte_key, extended_decrypt, extended_encrypt, to_bytes

DEFAULT_COLUMNS = 3


def super_encrypt(data: BytesLike, key: BytesLike, columns: int = DEFAULT_COLUMNS) -> bytes:
    return transpose(extended_encrypt(data, key), columns)


def super_decrypt(data: BytesLike, key: BytesLike, columns: int = DEFAULT_COLUMNS) -> bytes:
    byte_key(key)
    data = to_bytes(data)
    if not data:
        raise EmptyTextError()
    return extended_decrypt(inverse_transpose(data, columns), key)
