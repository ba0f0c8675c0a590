# alphabet.py
# Shared alphabet tables, settings and the index arithmetic used by every cipher

from .errors import DegenerateOffsetError, EmptyInputError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
WIDTH = len(ALPHABET)

# letter -> number (A=0, B=1, ..., Z=25)
letter_to_num = {ch: i for i, ch in enumerate(ALPHABET)}
# number -> letter (0=A, 1=B, ..., 25=Z)
num_to_letter = {i: ch for i, ch in enumerate(ALPHABET)}

# ---------- SETTINGS ----------
CAESAR_OFFSET = 3
VIGENERE_EXTRA_OFFSET = 1      # running-key variant adds one on top of the key letter
DEFAULT_SYMBOL_RANGE = 999     # homophonic tokens are drawn from "0".."999"
TOKEN_SEPARATOR = " "
MAX_SECRET = 2**63 - 1         # key exchange secret upper bound
DEFAULT_DH_KEY_SIZE = 512
DEFAULT_DH_GENERATOR = 2


def normalize(text):
    """Uppercase the letters of `text` and drop everything else.

    Raises EmptyInputError when `text` is empty or has no letters at all.
    Normalizing already normalized text gives the same text back.
    """
    if not text:
        raise EmptyInputError("given empty string")
    # only ASCII letters; str.upper() would turn "ß" into "SS"
    res = "".join(ch.upper() for ch in text if ch.isascii() and ch.upper() in letter_to_num)
    if not res:
        raise EmptyInputError(f"no letters left after normalizing {text!r}")
    return res


def rotate(index, offset):
    """
    Rotates an alphabet index by `offset` places.
    Formula: R = (I + offset) mod 26
    """
    if offset % WIDTH == 0:
        raise DegenerateOffsetError(
            f"offset {offset} would not change the text ({offset} % {WIDTH} == 0)")
    return (index + offset) % WIDTH   # python's % already lands in [0, WIDTH)
