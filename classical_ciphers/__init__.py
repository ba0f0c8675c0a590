"""
Classical ciphers for study: transposition, monoalphabetic and
polyalphabetic substitution, plus a toy Diffie-Hellman exchange.
None of this is secure; it reproduces historical constructions.
"""

from .alphabet import ALPHABET, WIDTH, normalize, rotate
from .errors import (
    CipherError, DegenerateOffsetError, EmptyInputError, MalformedKeyError,
    MissingKeyError, UnknownTokenError, UnmappedSymbolError,
)
from .key_exchange import exchange_step_one, exchange_step_two, generate_parameters
from .keymap import (
    ENGLISH_FREQUENCIES, absolute_error, apply_mapping, character_frequency,
    frequencies, frequency_deviation, invert_mapping, percentage_error, relative_error,
)
from .monoalphabetic import (
    HomophonicKey, atbash, caesar_decrypt, caesar_encrypt, check_pairing_key, generate_homophonic_key,
    generate_pairing_key, homophonic_decrypt, homophonic_encrypt, keyphrase_alphabet,
    keyphrase_decrypt, keyphrase_encrypt, keyphrase_key, pairing_decrypt, pairing_encrypt,
    pairing_key_from_rows, rotx,
)
from .polyalphabetic import generate_pad, otp_decrypt, otp_encrypt, vigenere_decrypt, vigenere_encrypt
from .structures import SymbolSet
from .transposition import railfence_decrypt, railfence_encrypt

__all__ = [
    'ALPHABET', 'WIDTH', 'normalize', 'rotate',
    'CipherError', 'DegenerateOffsetError', 'EmptyInputError', 'MalformedKeyError',
    'MissingKeyError', 'UnknownTokenError', 'UnmappedSymbolError',
    'exchange_step_one', 'exchange_step_two', 'generate_parameters',
    'ENGLISH_FREQUENCIES', 'absolute_error', 'apply_mapping', 'character_frequency',
    'frequencies', 'frequency_deviation', 'invert_mapping', 'percentage_error', 'relative_error',
    'HomophonicKey', 'atbash', 'caesar_decrypt', 'caesar_encrypt', 'check_pairing_key', 'generate_homophonic_key',
    'generate_pairing_key', 'homophonic_decrypt', 'homophonic_encrypt', 'keyphrase_alphabet',
    'keyphrase_decrypt', 'keyphrase_encrypt', 'keyphrase_key', 'pairing_decrypt', 'pairing_encrypt',
    'pairing_key_from_rows', 'rotx',
    'generate_pad', 'otp_decrypt', 'otp_encrypt', 'vigenere_decrypt', 'vigenere_encrypt',
    'SymbolSet',
    'railfence_decrypt', 'railfence_encrypt',
]
