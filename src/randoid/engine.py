"""Mapping of random bytes onto alphabet symbols.

Two strategies are used, depending on the alphabet's cardinality:

- **Fast path** (cardinality is a power of two): each random byte is masked
  with ``cardinality - 1`` and always lands on a valid symbol. Exactly one
  byte is drawn per symbol.
- **Generic path** (any other cardinality): each byte is masked with the
  smallest all-ones mask covering the alphabet, and bytes that land past the
  last symbol are discarded. Acceptance probability is always above 50%, so
  fewer than two bytes are drawn per symbol on average.

Both paths use masking instead of modulo, so neither introduces bias.
"""

from loguru import logger

from randoid.alphabet import Alphabet
from randoid.random_source import RandomSource
from randoid.sink import Sink

# Large enough for 64 symbols per fill on the fast path and about 40 on the
# generic path.
BUFFER_SIZE = 64


def write_symbols(alphabet: Alphabet, random: RandomSource, size: int, sink: Sink) -> None:
    """Write ``size`` uniformly chosen symbols of ``alphabet`` into ``sink``.

    Args:
        alphabet: Alphabet to draw symbols from
        random: Source of random bytes, advanced by this call
        size: Number of symbols to write
        sink: Destination for the symbols; anything it raises propagates

    A ``size`` of zero returns before any randomness is drawn.
    """
    if size == 0:
        return
    logger.trace(f"Writing {size} symbols via the {'fast' if alphabet.is_power_of_two else 'generic'} path")
    if alphabet.is_power_of_two:
        _write_fast(alphabet, random, size, sink)
    else:
        _write_generic(alphabet, random, size, sink)


def _write_fast(alphabet: Alphabet, random: RandomSource, size: int, sink: Sink) -> None:
    symbols = alphabet.symbols
    mask = alphabet.mask
    view = memoryview(bytearray(BUFFER_SIZE))

    remaining = size
    while remaining > 0:
        batch = view[: min(remaining, BUFFER_SIZE)]
        random.fill(batch)
        sink.write("".join([symbols[byte & mask] for byte in batch]))
        remaining -= len(batch)


def _write_generic(alphabet: Alphabet, random: RandomSource, size: int, sink: Sink) -> None:
    symbols = alphabet.symbols
    mask = alphabet.mask
    cardinality = len(symbols)
    view = memoryview(bytearray(BUFFER_SIZE))

    remaining = size
    while remaining > 0:
        # Roughly the bytes expected to yield `remaining` symbols, so one
        # fill usually suffices without drawing much surplus.
        step = min(BUFFER_SIZE, max(1, 8 * remaining // 5))
        batch = view[:step]
        random.fill(batch)

        accepted = [symbols[index] for byte in batch if (index := byte & mask) < cardinality]
        del accepted[remaining:]
        if accepted:
            sink.write("".join(accepted))
            remaining -= len(accepted)
