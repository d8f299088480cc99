"""Sources of random bytes consumed by the id generator.

The engine only ever asks a source to fill a byte buffer, so any generator of
randomness can be plugged in:

```python
from randoid import Generator, RandFn, SeededRandomSource, alphabets

Generator(8, alphabets.HEX, SeededRandomSource(42)).gen_id()

def zeros(buffer):
    buffer[:] = bytes(len(buffer))

Generator(8, alphabets.HEX, RandFn(zeros)).gen_id()  # "00000000"
```

Sources hold mutable state and are not safe to share between threads
without external locking. Use one source per thread and share alphabets.
"""

import random
import secrets
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeAlias

Buffer: TypeAlias = bytearray | memoryview
FillFunction: TypeAlias = Callable[[Buffer], None]


class RandomSource(ABC):
    """Abstract capability: fill a buffer with random bytes."""

    @abstractmethod
    def fill(self, buffer: Buffer) -> None:
        """Overwrite every byte of ``buffer`` with random data.

        Implementations must populate the whole buffer. A source that cannot
        produce randomness should block or raise; the engine never retries.
        """


class SystemRandomSource(RandomSource):
    """Cryptographically strong bytes from the operating system."""

    def fill(self, buffer: Buffer) -> None:
        buffer[:] = secrets.token_bytes(len(buffer))

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource(RandomSource):
    """Deterministic bytes from a seeded ``random.Random``.

    Two sources built with the same seed yield the same byte stream. Not
    suitable for anything that must be unpredictable.
    """

    def __init__(self, seed: int | str | bytes):
        self.seed = seed
        self._rng = random.Random(seed)

    def fill(self, buffer: Buffer) -> None:
        buffer[:] = self._rng.randbytes(len(buffer))

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self.seed!r})"


class RngSource(RandomSource):
    """Adapter for any object exposing ``randbytes(n)``, e.g. ``random.Random``."""

    def __init__(self, rng: Any):
        self.rng = rng

    def fill(self, buffer: Buffer) -> None:
        buffer[:] = self.rng.randbytes(len(buffer))


class RandFn(RandomSource):
    """Adapter for a plain function that fills a buffer in place."""

    def __init__(self, func: FillFunction):
        self.func = func

    def fill(self, buffer: Buffer) -> None:
        self.func(buffer)


def as_random_source(random_source: Any) -> RandomSource:
    """Coerce ``random_source`` into a :class:`RandomSource`.

    Accepts a ``RandomSource`` (returned as is), an object with a
    ``randbytes`` method, or a callable filling a buffer in place.

    Raises:
        TypeError: If the object matches none of the supported shapes
    """
    if isinstance(random_source, RandomSource):
        return random_source
    if callable(getattr(random_source, "randbytes", None)):
        return RngSource(random_source)
    if callable(random_source):
        return RandFn(random_source)
    raise TypeError(f"Cannot use {type(random_source).__name__} as a random source")
