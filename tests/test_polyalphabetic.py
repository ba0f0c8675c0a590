import random

import pytest

from classical_ciphers.alphabet import ALPHABET, normalize
from classical_ciphers.errors import EmptyInputError, MissingKeyError
from classical_ciphers.polyalphabetic import (
    generate_pad, otp_decrypt, otp_encrypt, vigenere_decrypt, vigenere_encrypt,
)

PLAINTEXT = "THYSECRETISTHYPRISONERIFTHOULETITGOTHOUARTAPRISONERTOIT"
KEYTEXT = "ANDYETEMANCIPATEDITMUSTBE"
CIPHERTEXT = "UVCRJWWRUWVCXZJWMBIAZKCHYICYKJNNGHCWQEVUWXJJEDLIPJSHSHY"


def test_vigenere_book_example():
    assert vigenere_encrypt(PLAINTEXT, KEYTEXT) == CIPHERTEXT
    assert vigenere_decrypt(CIPHERTEXT, KEYTEXT) == PLAINTEXT


def test_vigenere_adds_one_to_the_key_letter():
    assert vigenere_encrypt("A", "A") == "B"
    assert vigenere_encrypt("Z", "Z") == "Z"
    assert vigenere_decrypt("B", "A") == "A"
    assert vigenere_decrypt("A", "Z") == "A"


def test_vigenere_normalizes_text_first():
    messy = "Thy secret is thy prisoner; if thou let it go, thou art a prisoner to it"
    assert vigenere_encrypt(messy, KEYTEXT) == CIPHERTEXT
    assert vigenere_decrypt(vigenere_encrypt(messy, "lemon"), "LEMON") == normalize(messy)


@pytest.mark.parametrize("key", ["K", "KEY", "ANYOLDKEYWILLDO", "A" * 80])
def test_vigenere_round_trip(key):
    assert vigenere_decrypt(vigenere_encrypt(PLAINTEXT, key), key) == PLAINTEXT


@pytest.mark.parametrize("text, key", [("", "KEY"), ("TEXT", ""), ("123", "KEY"), ("TEXT", "42")])
def test_vigenere_rejects_empty_input(text, key):
    with pytest.raises(EmptyInputError):
        vigenere_encrypt(text, key)
    with pytest.raises(EmptyInputError):
        vigenere_decrypt(text, key)


def test_generate_pad():
    pad = generate_pad(40, random.Random(5))
    assert len(pad) == 40
    assert set(pad) <= set(ALPHABET)
    assert generate_pad(40, random.Random(5)) == pad


def test_generate_pad_uses_system_random_by_default():
    assert len(generate_pad(12)) == 12


def test_otp_round_trip():
    plaintext = "Well and truly unbreakable"
    ciphertext, key = otp_encrypt(plaintext)
    assert len(key) == len(normalize(plaintext)) == len(ciphertext)
    assert otp_decrypt(ciphertext, key) == "WELLANDTRULYUNBREAKABLE"


def test_otp_with_seeded_rng():
    ciphertext, key = otp_encrypt(PLAINTEXT, rng=random.Random(11))
    assert ciphertext == vigenere_encrypt(PLAINTEXT, key)
    assert otp_decrypt(ciphertext, key) == PLAINTEXT


def test_otp_decrypt_needs_enough_key():
    ciphertext, key = otp_encrypt(PLAINTEXT)
    with pytest.raises(MissingKeyError):
        otp_decrypt(ciphertext, "")
    with pytest.raises(MissingKeyError):
        otp_decrypt(ciphertext, None)
    with pytest.raises(MissingKeyError):
        otp_decrypt(ciphertext, key[:-1])


def test_otp_rejects_empty_plaintext():
    with pytest.raises(EmptyInputError):
        otp_encrypt("")


def test_otp_short_pad_message_counts_pad_letters():
    with pytest.raises(MissingKeyError, match=r"\(3 < 5\)"):
        otp_decrypt("ABCDE", "a-b-c")
