"""Constant alphabets shipped with randoid."""

import string

from randoid.alphabet import Alphabet
from randoid.exceptions import UnknownAlphabetError

# Url and filename safe, 64 symbols.
URL = Alphabet("_-" + string.digits + string.ascii_lowercase + string.ascii_uppercase)

# Default alphabet for ids.
DEFAULT = URL

# Hexadecimal, lowercase letters.
HEX = Alphabet(string.digits + "abcdef")

# Hexadecimal, uppercase letters.
HEX_UPPER = Alphabet(string.digits + "ABCDEF")

ALPHABETS: dict[str, Alphabet] = {
    "url": URL,
    "hex": HEX,
    "hex_upper": HEX_UPPER,
}


def get_alphabet(name: str) -> Alphabet:
    """Look up a registered alphabet by name (case-insensitive).

    Raises:
        UnknownAlphabetError: If no alphabet is registered under ``name``
    """
    try:
        return ALPHABETS[name.lower()]
    except KeyError:
        raise UnknownAlphabetError(name, sorted(ALPHABETS)) from None
