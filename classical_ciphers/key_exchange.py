'''
Diffie-Hellman-Merkle key exchange (toy/educational sketch).

Both sides agree on a public base g and modulus p, then:

step one, each side:   picks a secret a, publishes A = g^a mod p
step two, each side:   receives the peer's value B, derives B^a mod p

Both derived values are g^(ab) mod p. Nothing here checks that p is prime
or that g is a primitive root, and pow() is not constant time.
'''

import logging
import secrets

from cryptography.hazmat.primitives.asymmetric import dh

from .alphabet import DEFAULT_DH_GENERATOR, DEFAULT_DH_KEY_SIZE, MAX_SECRET
from .errors import MissingKeyError

logger = logging.getLogger(__name__)


def generate_parameters(key_size=DEFAULT_DH_KEY_SIZE, generator=DEFAULT_DH_GENERATOR):
    """Returns a (base, modulus) pair with a safe-prime modulus of `key_size` bits."""
    params = dh.generate_parameters(generator=generator, key_size=key_size)
    numbers = params.parameter_numbers()
    return numbers.g, numbers.p


def exchange_step_one(base, modulus, rng=None):
    """Returns (secret, base^secret mod modulus). Keep the secret, send the second value."""
    if base is None or modulus is None:
        raise MissingKeyError("got no base or modulus")
    if modulus < 2:
        raise ValueError("modulus must be at least 2")
    rng = rng or secrets.SystemRandom()
    secret = rng.randrange(1, MAX_SECRET)
    shared = pow(base, secret, modulus)
    logger.debug("key exchange step one done for a %d-bit modulus", modulus.bit_length())
    return secret, shared


def exchange_step_two(peer_value, secret, modulus):
    """Derives the common value from the peer's published value."""
    if peer_value is None or secret is None or modulus is None:
        raise MissingKeyError("got no peer value, secret or modulus")
    if modulus < 2:
        raise ValueError("modulus must be at least 2")
    if secret <= 0:
        raise ValueError("secret must be a positive integer")
    return pow(peer_value, secret, modulus)


if __name__ == "__main__":
    g, p = generate_parameters()
    a_secret, a_public = exchange_step_one(g, p)
    b_secret, b_public = exchange_step_one(g, p)
    a_key = exchange_step_two(b_public, a_secret, p)
    b_key = exchange_step_two(a_public, b_secret, p)
    print("[Alice] derived:", hex(a_key)[:34] + "...")
    print("[Bob]   derived:", hex(b_key)[:34] + "...")
    print("Match:", a_key == b_key)
