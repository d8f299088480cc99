"""Alphabet type used to generate ids."""

from collections.abc import Iterable, Iterator

from randoid.exceptions import InvalidAlphabetError

# Each symbol is addressed by a single random byte.
MAX_ALPHABET_SIZE = 255


class Alphabet:
    """An immutable, ordered set of distinct symbols.

    The cardinality decides how random bytes are mapped onto symbols: when it
    is a power of two every masked byte is a valid index, otherwise bytes
    that fall outside the alphabet are rejected. Both the mask and the
    power-of-two flag are computed once here so generation never has to.

    Alphabets are never mutated after construction and can be shared freely
    between generators and threads.

    Examples:
        >>> Alphabet("0123").mask
        3
        >>> Alphabet(["a", "b", "c"]).is_power_of_two
        False
    """

    __slots__ = ("_symbols", "_mask", "_is_power_of_two")

    def __init__(self, symbols: str | Iterable[str]):
        """Create an alphabet from a string or a sequence of symbols.

        Args:
            symbols: The symbols, in order. A string is split into its characters.

        Raises:
            InvalidAlphabetError: If the alphabet is empty, has more than 255
                symbols, contains duplicates, or holds a non-string symbol
        """
        symbols = tuple(symbols)
        size = len(symbols)
        if size == 0:
            raise InvalidAlphabetError("alphabet cannot be empty")
        if size > MAX_ALPHABET_SIZE:
            raise InvalidAlphabetError(f"alphabet cannot be longer than {MAX_ALPHABET_SIZE} symbols, got {size}")

        seen: set[str] = set()
        for symbol in symbols:
            if not isinstance(symbol, str) or not symbol:
                raise InvalidAlphabetError(f"symbols must be non-empty strings, got {symbol!r}")
            if symbol in seen:
                raise InvalidAlphabetError(f"duplicate symbol {symbol!r}")
            seen.add(symbol)

        is_power_of_two = size & (size - 1) == 0
        object.__setattr__(self, "_symbols", symbols)
        object.__setattr__(self, "_is_power_of_two", is_power_of_two)
        # Smallest all-ones mask covering every index.
        object.__setattr__(self, "_mask", size - 1 if is_power_of_two else (1 << size.bit_length()) - 1)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # Rebuild through __init__; slot restoration would hit __setattr__.
        return (type(self), (self._symbols,))

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def mask(self) -> int:
        """Bit mask applied to each random byte before lookup."""
        return self._mask

    @property
    def is_power_of_two(self) -> bool:
        """Whether every masked byte maps onto a symbol (no rejection needed)."""
        return self._is_power_of_two

    def __len__(self) -> int:
        return len(self._symbols)

    def __getitem__(self, index: int) -> str:
        if not 0 <= index < len(self._symbols):
            raise IndexError(f"alphabet index out of range: {index}")
        return self._symbols[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._symbols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self) -> int:
        return hash(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self._symbols)!r})"
