import pytest

from cipherkit.errors import EmptyKeyError, EmptyTextError
from cipherkit.vigenere import (autokey_decrypt, autokey_encrypt, extended_decrypt,
                                extended_encrypt, vigenere_decrypt, vigenere_encrypt)


def test_vigenere_known_vector():
    assert vigenere_encrypt("HELLOWORLD", "KEY") == "RIJVSUYVJN"
    assert vigenere_decrypt("RIJVSUYVJN", "KEY") == "HELLOWORLD"


def test_vigenere_normalizes_text_and_key():
    assert vigenere_encrypt("hello, world", "k-e-y") == "RIJVSUYVJN"


@pytest.mark.parametrize("text,key", [
    ("ATTACKATDAWN", "LEMON"),
    ("Z", "ZZZZZZ"),
    ("THEQUICKBROWNFOXJUMPSOVERTHELAZYDOG", "A"),
])
def test_vigenere_round_trip(text, key):
    assert vigenere_decrypt(vigenere_encrypt(text, key), key) == text


def test_vigenere_validation():
    with pytest.raises(EmptyKeyError):
        vigenere_encrypt("hello", "")
    with pytest.raises(EmptyKeyError):
        vigenere_encrypt("hello", "123")
    with pytest.raises(EmptyTextError):
        vigenere_decrypt("!!!", "KEY")


def test_autokey_known_vector():
    assert autokey_encrypt("attack at dawn", "QUEENLY") == "QNXEPVYTWTWP"
    assert autokey_decrypt("QNXEPVYTWTWP", "queenly") == "ATTACKATDAWN"


def test_autokey_differs_from_vigenere_after_primer():
    ct = autokey_encrypt("HELLOWORLD", "KEY")
    assert ct[:3] == vigenere_encrypt("HELLOWORLD", "KEY")[:3]
    assert ct != vigenere_encrypt("HELLOWORLD", "KEY")


def test_autokey_long_primer():
    assert autokey_decrypt(autokey_encrypt("HI", "LONGERKEY"), "LONGERKEY") == "HI"


def test_autokey_validation():
    with pytest.raises(EmptyKeyError):
        autokey_decrypt("ABC", "")
    with pytest.raises(EmptyTextError):
        autokey_encrypt("", "KEY")


def test_extended_wraps_mod_256():
    assert extended_encrypt(b"abc", b"\x01") == b"bcd"
    assert extended_encrypt(b"\xff", b"\x02") == b"\x01"
    assert extended_decrypt(b"\x01", b"\x02") == b"\xff"


def test_extended_accepts_str():
    assert extended_encrypt("A", "A") == bytes([130])
    assert extended_decrypt(extended_encrypt("héllo wörld", "clé"), "clé") == "héllo wörld".encode("utf-8")


def test_extended_round_trip_all_bytes():
    data = bytes(range(256))
    key = b"\x00\x80\xff\x13"
    assert extended_decrypt(extended_encrypt(data, key), key) == data


def test_extended_does_not_mutate_input():
    data = bytearray(b"secret")
    extended_encrypt(data, b"k")
    assert data == bytearray(b"secret")


def test_extended_validation():
    with pytest.raises(EmptyKeyError):
        extended_encrypt(b"abc", b"")
    with pytest.raises(EmptyTextError):
        extended_decrypt(b"", b"k")
