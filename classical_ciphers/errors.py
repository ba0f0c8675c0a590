# errors.py
# Error kinds raised by the cipher functions. Everything derives from
# ValueError so callers that already catch ValueError keep working.


class CipherError(ValueError):
    """Base class for every error raised by classical_ciphers."""


class EmptyInputError(CipherError):
    """A text, key or sequence was empty where one is required."""


class DegenerateOffsetError(CipherError):
    """A rotation offset is congruent to 0 mod the alphabet width."""


class UnmappedSymbolError(CipherError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} has no entry in the key")


class UnknownTokenError(CipherError):
    def __init__(self, token):
        self.token = token
        super().__init__(f"token {token!r} is not part of the homophonic key")


class MissingKeyError(CipherError):
    """Not enough key material (no key, empty key, key too short)."""


class MalformedKeyError(CipherError):
    """A substitution key is not a total bijection where one is required."""
