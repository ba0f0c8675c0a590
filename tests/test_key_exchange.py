import random

import pytest

from classical_ciphers.errors import MissingKeyError
from classical_ciphers.key_exchange import exchange_step_one, exchange_step_two, generate_parameters

# small textbook group: p = 23, g = 5
BASE, MODULUS = 5, 23


def test_both_sides_derive_the_same_value():
    a_secret, a_public = exchange_step_one(BASE, MODULUS)
    b_secret, b_public = exchange_step_one(BASE, MODULUS)
    assert exchange_step_two(b_public, a_secret, MODULUS) == exchange_step_two(a_public, b_secret, MODULUS)


def test_step_one_with_seeded_rng():
    secret, public = exchange_step_one(BASE, MODULUS, rng=random.Random(2))
    assert secret > 0
    assert public == pow(BASE, secret, MODULUS)
    assert exchange_step_one(BASE, MODULUS, rng=random.Random(2)) == (secret, public)


def test_textbook_values():
    # Alice a=6, Bob b=15 -> A=8, B=19, shared 2
    assert exchange_step_two(19, 6, MODULUS) == 2
    assert exchange_step_two(8, 15, MODULUS) == 2


def test_generated_parameters_work():
    base, modulus = generate_parameters(key_size=512)
    assert base == 2
    assert modulus.bit_length() == 512
    a_secret, a_public = exchange_step_one(base, modulus)
    b_secret, b_public = exchange_step_one(base, modulus)
    assert exchange_step_two(b_public, a_secret, modulus) == exchange_step_two(a_public, b_secret, modulus)


def test_argument_checks():
    with pytest.raises(MissingKeyError):
        exchange_step_one(None, MODULUS)
    with pytest.raises(MissingKeyError):
        exchange_step_two(8, None, MODULUS)
    with pytest.raises(ValueError):
        exchange_step_one(BASE, 1)
    with pytest.raises(ValueError):
        exchange_step_two(8, 0, MODULUS)
