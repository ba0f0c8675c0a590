# ---------------------------------------------------------
# Monoalphabetic substitution ciphers
# ---------------------------------------------------------
# The cipher alphabet stays fixed for the whole message:
# 1. Pairing cipher (Mlecchita-vikalpa, letters swapped in pairs)
# 2. Rotation cipher (ROT-X, Caesar = ROT+3)
# 3. Keyphrase cipher
# 4. Atbash (mirror alphabet)
# 5. Homophonic cipher (several numeric tokens per letter)
# ---------------------------------------------------------

import logging
import math
import random

from .alphabet import (
    ALPHABET, CAESAR_OFFSET, DEFAULT_SYMBOL_RANGE, TOKEN_SEPARATOR, WIDTH,
    letter_to_num, normalize, num_to_letter, rotate,
)
from .errors import (
    DegenerateOffsetError, EmptyInputError, MalformedKeyError, MissingKeyError, UnknownTokenError,
)
from .keymap import apply_mapping, check_bijection, frequencies, invert_mapping
from .structures import SymbolSet

logger = logging.getLogger(__name__)


def _substitute(text, key):
    return "".join(apply_mapping(text, key))


# ---------------- PAIRING CIPHER ----------------
def generate_pairing_key(rng=None):
    """
    Pairs up the 26 letters at random into 13 couples and returns the key
    as a dict where both directions are present (A->Q and Q->A).
    Applying the key twice gives the original text back.
    """
    rng = rng or random
    key = {}
    unpaired = SymbolSet(ALPHABET)

    while len(unpaired) > 0:
        # sorted so a seeded rng always yields the same key
        first = rng.choice(sorted(unpaired))
        unpaired.remove(first)
        second = rng.choice(sorted(unpaired))
        unpaired.remove(second)

        key[first] = second
        key[second] = first

    logger.debug("generated pairing key with %d pairs", len(key) // 2)
    return key


def pairing_key_from_rows(top, bottom):
    """
    Builds a pairing key from the two printed rows of the historical key,
    e.g. ADHIKMORSUWYZ over VXBGJCQLNEFPT: every letter of the top row is
    swapped with the letter underneath it.
    """
    top, bottom = normalize(top), normalize(bottom)
    if len(top) != len(bottom):
        raise MalformedKeyError("both rows of a pairing key must have the same length")

    key = {}
    for a, b in zip(top, bottom):
        if a in key or b in key or a == b:
            raise MalformedKeyError(f"letter repeated in pairing key rows ({a}/{b})")
        key[a] = b
        key[b] = a
    if len(key) != WIDTH:
        raise MalformedKeyError("pairing key rows must use every letter exactly once")
    return key


def check_pairing_key(key):
    """Raises MalformedKeyError unless `key` swaps the 26 letters in 13 pairs."""
    check_bijection(key)
    for a, b in key.items():
        if a == b:
            raise MalformedKeyError(f"pairing key leaves {a} unchanged")
        if key[b] != a:
            raise MalformedKeyError(f"pairing key maps {a} to {b} but {b} to {key[b]}")


def pairing_encrypt(plaintext, key=None, rng=None):
    """Returns (ciphertext, key). A fresh key is generated when none is given."""
    if not plaintext:
        raise EmptyInputError("given empty string")
    if key is None:
        key = generate_pairing_key(rng)
    else:
        check_pairing_key(key)
    return _substitute(plaintext, key), key


def pairing_decrypt(ciphertext, key):
    # the key is its own inverse
    if not key:
        raise MissingKeyError("pairing cipher needs the key used for encryption")
    check_pairing_key(key)
    return _substitute(ciphertext, key)


# ---------------- ROTATION (ROT-X / CAESAR) ----------------
def rotx(text, offset):
    """
    Rotates every uppercase letter A-Z by `offset` places; everything else,
    lowercase letters included, is kept as is. Normalize first to rotate those too.
    Formula: C = (P + offset) mod 26
    A negative offset undoes a positive one.
    """
    if not text:
        raise EmptyInputError("given empty string")
    if offset % WIDTH == 0:
        raise DegenerateOffsetError(f"offset {offset} would not change the text")
    res = []
    for ch in text:
        if ch in letter_to_num:
            res.append(num_to_letter[rotate(letter_to_num[ch], offset)])
        else:
            res.append(ch)
    return "".join(res)


def caesar_encrypt(text):
    return rotx(text, CAESAR_OFFSET)


def caesar_decrypt(text):
    return rotx(text, -CAESAR_OFFSET)


# ---------------- KEYPHRASE CIPHER ----------------
def keyphrase_alphabet(keyphrase):
    """
    Builds the cipher alphabet for a keyphrase:
    drop repeated letters, then continue with the rest of the alphabet
    starting after the keyphrase's last letter, wrapping around.

    JULIUS CAESAR -> JULISCAER + TVWXYZ + BDFGHKMNOPQ
    """
    phrase = normalize(keyphrase)
    last = letter_to_num[phrase[-1]]
    candidates = phrase + ALPHABET[last + 1:] + ALPHABET[:last]

    used = SymbolSet()
    cipher_alphabet = []
    for ch in candidates:
        if ch not in used:
            used.add(ch)
            cipher_alphabet.append(ch)
    return "".join(cipher_alphabet)


def keyphrase_key(keyphrase):
    """Plain letter -> cipher letter mapping for `keyphrase`."""
    key = dict(zip(ALPHABET, keyphrase_alphabet(keyphrase)))
    check_bijection(key)
    return key


def keyphrase_encrypt(plaintext, keyphrase):
    if not plaintext:
        raise EmptyInputError("given empty string")
    return _substitute(plaintext, keyphrase_key(keyphrase))


def keyphrase_decrypt(ciphertext, keyphrase):
    if not ciphertext:
        raise EmptyInputError("given empty string")
    return _substitute(ciphertext, invert_mapping(keyphrase_key(keyphrase)))


# ---------------- ATBASH ----------------
# A<->Z, B<->Y, C<->X, ...
ATBASH_KEY = {ch: num_to_letter[WIDTH - 1 - i] for i, ch in enumerate(ALPHABET)}


def atbash(text):
    """Mirror substitution; encrypting and decrypting are the same call."""
    if not text:
        raise EmptyInputError("given empty string")
    return _substitute(text, ATBASH_KEY)


# ---------------- HOMOPHONIC CIPHER ----------------
class HomophonicKey:
    """
    homophones: plaintext symbol -> list of tokens that stand for it
    symbols:    token -> plaintext symbol (used for decryption)
    """

    def __init__(self, homophones=None, symbols=None):
        self.homophones = homophones if homophones is not None else {}
        self.symbols = symbols if symbols is not None else {}

    def assign(self, symbol, token):
        self.homophones.setdefault(symbol, []).append(token)
        self.symbols[token] = symbol

    def __len__(self):
        return len(self.symbols)

    def __repr__(self):
        return f"HomophonicKey({len(self.homophones)} symbols, {len(self.symbols)} tokens)"


def homophone_count(freq):
    """Number of tokens a symbol gets: one per started percent, at least 2."""
    return max(2, math.ceil(freq * 100))


def generate_homophonic_key(plaintext, symbol_range=DEFAULT_SYMBOL_RANGE, rng=None):
    """
    Gives every distinct symbol of `plaintext` a number of tokens in
    proportion to how often it occurs. Tokens are numbers 0..symbol_range
    (as strings) and are never shared between symbols.
    """
    if not plaintext:
        raise EmptyInputError("given empty string")
    rng = rng or random

    freqs = frequencies(list(plaintext))
    needed = sum(homophone_count(freq) for freq in freqs.values())
    if needed > symbol_range + 1:
        raise ValueError(
            f"symbol range 0..{symbol_range} is too small, {needed} distinct tokens are needed")

    key = HomophonicKey()
    issued = SymbolSet()
    for symbol, freq in freqs.items():
        for _ in range(homophone_count(freq)):
            token = str(rng.randint(0, symbol_range))
            while token in issued:
                token = str(rng.randint(0, symbol_range))
            issued.add(token)
            key.assign(symbol, token)

    logger.debug("generated homophonic key: %d symbols, %d tokens", len(key.homophones), len(key))
    return key


def homophonic_encrypt(plaintext, symbol_range=DEFAULT_SYMBOL_RANGE, rng=None, key=None):
    """
    Returns (ciphertext, key). Each symbol is replaced by one of its tokens
    picked at random; tokens are separated by TOKEN_SEPARATOR.
    """
    if not plaintext:
        raise EmptyInputError("given empty string")
    rng = rng or random
    if key is None:
        key = generate_homophonic_key(plaintext, symbol_range, rng)

    tokens = [rng.choice(choices) for choices in apply_mapping(plaintext, key.homophones)]
    return TOKEN_SEPARATOR.join(tokens), key


def homophonic_decrypt(ciphertext, key):
    if not ciphertext:
        raise EmptyInputError("given empty string")
    if key is None or len(key) == 0:
        raise MissingKeyError("given empty homophonic key")

    res = []
    for token in ciphertext.split(TOKEN_SEPARATOR):
        if token not in key.symbols:
            raise UnknownTokenError(token)
        res.append(key.symbols[token])
    return "".join(res)


if __name__ == "__main__":
    pt = normalize("VENI, VIDI, VICI")
    print("Caesar:    ", caesar_encrypt(pt))
    print("Atbash:    ", atbash(pt))
    print("Keyphrase: ", keyphrase_encrypt("ETTUBRUTE", "BEWAREIDES"))

    ct, key = pairing_encrypt(pt)
    print("Pairing:   ", ct, "->", pairing_decrypt(ct, key))

    ct, key = homophonic_encrypt(pt)
    print("Homophonic:", ct, "->", homophonic_decrypt(ct, key))
