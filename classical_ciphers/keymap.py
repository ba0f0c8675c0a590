# keymap.py
# Mapping a sequence through a key, inverting keys and counting frequencies

from .alphabet import ALPHABET
from .errors import EmptyInputError, MalformedKeyError, MissingKeyError, UnmappedSymbolError

# Relative letter frequencies of English text (sum is 1.0 up to rounding)
ENGLISH_FREQUENCIES = {
    'A': 0.0817, 'B': 0.0129, 'C': 0.0278, 'D': 0.0425, 'E': 0.1270, 'F': 0.0223,
    'G': 0.0202, 'H': 0.0609, 'I': 0.0697, 'J': 0.0015, 'K': 0.0077, 'L': 0.0403,
    'M': 0.0241, 'N': 0.0675, 'O': 0.0751, 'P': 0.0193, 'Q': 0.0010, 'R': 0.0599,
    'S': 0.0633, 'T': 0.0906, 'U': 0.0276, 'V': 0.0098, 'W': 0.0236, 'X': 0.0015,
    'Y': 0.0197, 'Z': 0.0007,
}


# ---------- KEY MAPPING ----------
def apply_mapping(sequence, mapping):
    """
    Replaces every element of `sequence` with its image in `mapping`.
    Returns a list; callers working on text join it back together.
    """
    if len(sequence) == 0:
        raise EmptyInputError("got empty sequence")
    if not mapping:
        raise MissingKeyError("got empty key")
    res = []
    for cur in sequence:
        try:
            res.append(mapping[cur])
        except KeyError:
            raise UnmappedSymbolError(cur) from None
    return res


def invert_mapping(mapping):
    """Returns the inverse of a one-to-one mapping (value -> key)."""
    if not mapping:
        raise MissingKeyError("given empty map")
    inverse = {}
    for key, value in mapping.items():
        if value in inverse:
            raise MalformedKeyError(
                f"{inverse[value]!r} and {key!r} both map to {value!r}, key is not a bijection")
        inverse[value] = key
    return inverse


def check_bijection(mapping, alphabet=ALPHABET):
    """Raises MalformedKeyError unless `mapping` is a permutation of `alphabet`."""
    if set(mapping) != set(alphabet) or set(mapping.values()) != set(alphabet):
        raise MalformedKeyError("key must map every letter of the alphabet onto the alphabet")
    invert_mapping(mapping)


# ---------- FREQUENCY ANALYSIS ----------
def frequencies(sequence):
    """Relative frequency of each element in `sequence`; values sum to 1."""
    if len(sequence) == 0:
        raise EmptyInputError("given empty sequence")
    counts = {}
    for item in sequence:
        counts[item] = counts.get(item, 0) + 1
    total = len(sequence)
    return {item: count / total for item, count in counts.items()}


def character_frequency(text):
    return frequencies(list(text))


def absolute_error(observed, true):
    # raw distance from the expected value
    return abs(observed - true)


def relative_error(observed, true):
    if true == 0:
        raise ValueError("relative error is undefined for a true value of 0")
    return absolute_error(observed, true) / true


def percentage_error(observed, true):
    return relative_error(observed, true) * 100


def frequency_deviation(table, expected=None):
    """
    Mean absolute error between a frequency table and the expected letter
    frequencies (English by default). Letters missing from `table` count as 0.
    """
    if expected is None:
        expected = ENGLISH_FREQUENCIES
    if not expected:
        raise EmptyInputError("given empty expected frequencies")
    total = sum(absolute_error(table.get(letter, 0.0), freq) for letter, freq in expected.items())
    return total / len(expected)
