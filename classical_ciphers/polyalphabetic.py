# ---------------------------------------------------------
# Polyalphabetic substitution: running key (Vigenère) and one-time pad
# ---------------------------------------------------------
# The key letter for position i is key[i mod len(key)], so the cipher
# alphabet changes from letter to letter.
# This variant shifts by one more than the key letter:
#   C = (P + K + 1) mod 26
#   P = (C - K - 1) mod 26
# With key letter A a plaintext A therefore encrypts to B.
# ---------------------------------------------------------

import logging
import secrets

from .alphabet import ALPHABET, VIGENERE_EXTRA_OFFSET, WIDTH, letter_to_num, normalize, num_to_letter
from .errors import MissingKeyError

logger = logging.getLogger(__name__)


# ---------------- VIGENÈRE CIPHER ----------------
def vigenere_encrypt(plaintext, key):
    """
    Encrypts plaintext with a repeating key.
    Formula: C = (P + K + 1) mod 26
    The plaintext and key are normalized first (uppercase, letters only).
    """
    plaintext = normalize(plaintext)
    key_nums = [letter_to_num[k] for k in normalize(key)]
    key_len = len(key_nums)

    ciphertext = []
    for i, ch in enumerate(plaintext):
        c = (letter_to_num[ch] + key_nums[i % key_len] + VIGENERE_EXTRA_OFFSET) % WIDTH
        ciphertext.append(num_to_letter[c])
    return "".join(ciphertext)


def vigenere_decrypt(ciphertext, key):
    """
    Decrypts ciphertext with a repeating key.
    Formula: P = (C - K - 1) mod 26
    """
    ciphertext = normalize(ciphertext)
    key_nums = [letter_to_num[k] for k in normalize(key)]
    key_len = len(key_nums)

    plaintext = []
    for i, ch in enumerate(ciphertext):
        p = letter_to_num[ch] - key_nums[i % key_len] - VIGENERE_EXTRA_OFFSET
        if p < 0:
            p += WIDTH
        plaintext.append(num_to_letter[p])
    return "".join(plaintext)


# ---------------- ONE-TIME PAD ----------------
def generate_pad(length, rng=None):
    """Random key of `length` letters; uses the OS random source by default."""
    rng = rng or secrets.SystemRandom()
    pad = "".join(rng.choice(ALPHABET) for _ in range(length))
    logger.debug("generated one-time pad of %d letters", length)
    return pad


def otp_encrypt(plaintext, rng=None):
    """
    Returns (ciphertext, key). The key is exactly as long as the normalized
    plaintext and must be used for this message only.
    """
    plaintext = normalize(plaintext)
    key = generate_pad(len(plaintext), rng)
    return vigenere_encrypt(plaintext, key), key


def otp_decrypt(ciphertext, key):
    if not key:
        raise MissingKeyError("one-time pad decryption needs the pad")
    ciphertext = normalize(ciphertext)
    pad = normalize(key)
    if len(pad) < len(ciphertext):
        raise MissingKeyError(
            f"pad has fewer letters than the ciphertext ({len(pad)} < {len(ciphertext)})")
    return vigenere_decrypt(ciphertext, pad)


if __name__ == "__main__":
    pt = "THYSECRETISTHYPRISONERIFTHOULETITGOTHOUARTAPRISONERTOIT"
    key = "ANDYETEMANCIPATEDITMUSTBE"

    ct = vigenere_encrypt(pt, key)
    print("Vigenère Encrypted:", ct)
    print("Vigenère Decrypted:", vigenere_decrypt(ct, key))

    ct, pad = otp_encrypt("WELL AND TRULY UNBREAKABLE")
    print("One-time pad:      ", pad)
    print("OTP Encrypted:     ", ct)
    print("OTP Decrypted:     ", otp_decrypt(ct, pad))
