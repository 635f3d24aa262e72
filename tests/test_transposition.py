import pytest

from cipherkit.transposition import inverse_transpose, transpose


def test_transpose_short_last_row():
    # HEL / LOW / ORL / D
    assert transpose("HELLOWORLD", 3) == "HLODEORLWL"


def test_inverse_transpose_short_last_row():
    assert inverse_transpose("HLODEORLWL", 3) == "HELLOWORLD"


def test_transpose_bytes_keeps_type():
    out = transpose(b"\x00\x01\x02\x03\x04", 2)
    assert out == b"\x00\x02\x04\x01\x03"
    assert inverse_transpose(out, 2) == b"\x00\x01\x02\x03\x04"


def test_non_positive_columns_behave_like_one():
    assert transpose("ABC", 0) == "ABC"
    assert inverse_transpose("ABC", -4) == "ABC"


@pytest.mark.parametrize("text", ["A", "AB", "SUPERSECRET", "THEQUICKBROWNFOX", "x" * 7 + "y" * 6])
@pytest.mark.parametrize("columns", [1, 2, 3, 4, 5, 7, 20])
def test_round_trip(text, columns):
    assert inverse_transpose(transpose(text, columns), columns) == text


def test_empty_text():
    assert transpose("", 3) == ""
    assert inverse_transpose(b"", 3) == b""
