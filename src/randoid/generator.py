"""The id generator."""

import io
from collections.abc import Iterator

from loguru import logger

from randoid.alphabet import Alphabet
from randoid.alphabets import URL
from randoid.engine import write_symbols
from randoid.random_source import RandomSource, as_random_source
from randoid.sink import Sink

# Default length of a generated id.
DEFAULT_SIZE = 21


def _check_size(size: int) -> int:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    return size


class Generator:
    """Generates ids of a fixed size from an alphabet and a random source.

    The generator owns its random source: every generation call advances the
    source's state. The alphabet is only referenced and may be shared with
    any number of other generators.

    Examples:
        >>> from randoid import Generator, SeededRandomSource, alphabets
        >>> gen = Generator(8, alphabets.HEX, SeededRandomSource(7))
        >>> len(gen.gen_id())
        8
    """

    def __init__(self, size: int, alphabet: Alphabet, random: RandomSource):
        """Initialize the generator.

        Args:
            size: Number of symbols in each id (may be zero)
            alphabet: Alphabet to draw symbols from
            random: Source of random bytes; callables and objects with
                ``randbytes`` are adapted automatically

        Raises:
            ValueError: If size is negative
        """
        self._size = _check_size(size)
        self._alphabet = alphabet
        self._random = as_random_source(random)
        logger.debug(
            f"Created generator: size={size}, alphabet={len(alphabet)} symbols "
            f"({'fast' if alphabet.is_power_of_two else 'generic'} path)"
        )

    @classmethod
    def with_random(cls, random: RandomSource) -> "Generator":
        """Create a generator with the default size and url-safe alphabet."""
        return cls(DEFAULT_SIZE, URL, random)

    @property
    def size(self) -> int:
        return self._size

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def random(self) -> RandomSource:
        return self._random

    def with_size(self, size: int) -> "Generator":
        """Return a generator producing ids of ``size`` symbols.

        The new generator takes over this generator's random source as is:
        nothing is reseeded or drawn. Keep using only the returned generator.
        """
        logger.debug(f"Rebinding generator size: {self._size} -> {size}")
        return Generator(size, self._alphabet, self._random)

    def with_alphabet(self, alphabet: Alphabet) -> "Generator":
        """Return a generator drawing from ``alphabet``, sharing the random source.

        Like :meth:`with_size`, the random source state is carried over untouched.
        """
        logger.debug(f"Rebinding generator alphabet: {len(self._alphabet)} -> {len(alphabet)} symbols")
        return Generator(self._size, alphabet, self._random)

    def write_to(self, sink: Sink) -> None:
        """Generate one id directly into ``sink``.

        Exceptions raised by the sink propagate unchanged; the sink may then
        hold a partial id, never more than ``size`` symbols of it.
        """
        write_symbols(self._alphabet, self._random, self._size, sink)

    def gen_id(self) -> str:
        """Generate one id and return it as a string."""
        out = io.StringIO()
        self.write_to(out)
        return out.getvalue()

    def lazy(self) -> "LazyId":
        """Return a :class:`LazyId` bound to this generator."""
        return LazyId(self)

    def __repr__(self) -> str:
        return f"Generator(size={self._size}, alphabet={self._alphabet!r}, random={self._random!r})"


class LazyId:
    """Deferred id generation, bound to a generator.

    Nothing is generated until the value is consumed, either with
    :meth:`write_to` or by iterating. Every consumption is a fresh generation
    call that advances the generator's random source, so using the same
    ``LazyId`` twice yields two different ids:

        >>> from randoid import Generator, SeededRandomSource
        >>> lazy = Generator.with_random(SeededRandomSource(1)).lazy()
        >>> next(lazy) != next(lazy)
        True
    """

    def __init__(self, generator: Generator):
        self.generator = generator

    def write_to(self, sink: Sink) -> None:
        """Generate a new id into ``sink``. Not idempotent."""
        self.generator.write_to(sink)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        return self.generator.gen_id()
