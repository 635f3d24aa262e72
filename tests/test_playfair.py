import pytest

from cipherkit.errors import EmptyKeyError, EmptyTextError, LengthMismatchError
from cipherkit.playfair import (PLAYFAIR_ALPHABET, PlayfairCipher, build_matrix, find_position,
                                playfair_decrypt, playfair_encrypt, prepare_plaintext)

KEY = "playfair example"


def test_build_matrix():
    square = build_matrix(KEY)
    assert square == [
        list("PLAYF"),
        list("IREXM"),
        list("BCDGH"),
        list("KNOQS"),
        list("TUVWZ"),
    ]


def test_build_matrix_has_every_letter_once():
    letters = [ch for row in build_matrix("Jumping jackrabbits!") for ch in row]
    assert sorted(letters) == sorted(PLAYFAIR_ALPHABET)
    assert letters[:3] == ["I", "U", "M"]


def test_find_position():
    square = build_matrix(KEY)
    assert find_position(square, "E") == (1, 2)
    with pytest.raises(ValueError):
        find_position(square, "J")


def test_prepare_plaintext():
    assert prepare_plaintext("balloon") == "BALXLOXONX"
    assert prepare_plaintext("jam") == "IAMX"
    assert prepare_plaintext("tree") == "TREXEX"


def test_encrypt_known_vector():
    assert playfair_encrypt("Hide the gold in the tree stump", KEY) == \
        "BMODZBXDNABEKUDMUIXMMOUVIF"


def test_decrypt_known_vector():
    assert playfair_decrypt("BMODZBXDNABEKUDMUIXMMOUVIF", KEY) == \
        "HIDETHEGOLDINTHETREXESTUMP"


def test_round_trip_prepared_text():
    prepared = prepare_plaintext("meet me at the usual place")
    assert playfair_decrypt(playfair_encrypt(prepared, "monarchy"), "monarchy") == prepared


def test_decrypt_rejects_odd_length():
    with pytest.raises(LengthMismatchError):
        playfair_decrypt("ABC", KEY)


def test_empty_inputs():
    with pytest.raises(EmptyKeyError):
        playfair_encrypt("hello", " 12 ")
    with pytest.raises(EmptyTextError):
        playfair_encrypt("1234", KEY)
    with pytest.raises(EmptyTextError):
        playfair_decrypt("", KEY)


def test_cipher_caches_square_until_key_changes():
    cipher = PlayfairCipher(KEY)
    first = cipher.matrix
    assert cipher.matrix is first
    cipher.key = "monarchy"
    assert cipher.matrix is not first
    assert cipher.matrix[0] == list("MONAR")


def test_cipher_matches_functions():
    cipher = PlayfairCipher(KEY)
    ct = cipher.encrypt("instruments")
    assert ct == playfair_encrypt("instruments", KEY)
    assert cipher.decrypt(ct) == prepare_plaintext("instruments")


def test_cipher_rejects_empty_key():
    with pytest.raises(EmptyKeyError):
        PlayfairCipher("")
