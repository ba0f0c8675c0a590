import pytest

from classical_ciphers.alphabet import WIDTH, normalize, rotate
from classical_ciphers.errors import DegenerateOffsetError, EmptyInputError


@pytest.mark.parametrize("text, expected", [
    ("VENI,VIDI,VICI", "VENIVIDIVICI"),
    ("Meet at midnight!", "MEETATMIDNIGHT"),
    ("abc123xyz", "ABCXYZ"),
])
def test_normalize(text, expected):
    assert normalize(text) == expected


def test_normalize_is_idempotent():
    once = normalize("Thy secret is thy prisoner; if thou let it go")
    assert normalize(once) == once


@pytest.mark.parametrize("text", ["", "123 !?", "   "])
def test_normalize_rejects_text_without_letters(text):
    with pytest.raises(EmptyInputError):
        normalize(text)


def test_rotate_wraps_around():
    assert rotate(25, 1) == 0
    assert rotate(0, -1) == 25
    assert rotate(2, 3) == 5
    assert rotate(3, -29) == 0


@pytest.mark.parametrize("offset", [0, 26, -26, 52])
def test_rotate_rejects_degenerate_offset(offset):
    with pytest.raises(DegenerateOffsetError):
        rotate(4, offset)


@pytest.mark.parametrize("offset", [1, 3, 13, 25, -7, 40])
def test_rotate_is_undone_by_negative_offset(offset):
    for index in range(WIDTH):
        assert rotate(rotate(index, offset), -offset) == index


@pytest.mark.parametrize("text, expected", [
    ("straße", "STRAE"),
    ("ﬁne", "NE"),
    ("ınſide", "NIDE"),
    ("café", "CAF"),
])
def test_normalize_drops_letters_outside_the_alphabet(text, expected):
    assert normalize(text) == expected
