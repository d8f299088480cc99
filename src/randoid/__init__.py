"""randoid: short random ids from a custom alphabet.

Quick start:

```python
from randoid import Generator, SystemRandomSource, alphabets, randoid

randoid()                                     # 21 url-safe symbols
Generator(8, alphabets.HEX, SystemRandomSource()).gen_id()
```
"""

from loguru import logger

from randoid import alphabets
from randoid.alphabet import MAX_ALPHABET_SIZE, Alphabet
from randoid.alphabets import DEFAULT, HEX, HEX_UPPER, URL, get_alphabet
from randoid.defaults import default_generator, randoid, with_alphabet, with_size
from randoid.engine import BUFFER_SIZE, write_symbols
from randoid.exceptions import InvalidAlphabetError, RandoidError, SinkFullError, UnknownAlphabetError
from randoid.generator import DEFAULT_SIZE, Generator, LazyId
from randoid.random_source import (
    RandFn,
    RandomSource,
    RngSource,
    SeededRandomSource,
    SystemRandomSource,
    as_random_source,
)
from randoid.settings import Settings, get_settings
from randoid.sink import BoundedSink, Sink

# Silent unless the application opts in with logger.enable("randoid").
logger.disable(__name__)

__version__ = "0.3.0"

__all__ = [
    "Alphabet",
    "BoundedSink",
    "BUFFER_SIZE",
    "DEFAULT",
    "DEFAULT_SIZE",
    "Generator",
    "HEX",
    "HEX_UPPER",
    "InvalidAlphabetError",
    "LazyId",
    "MAX_ALPHABET_SIZE",
    "RandFn",
    "RandoidError",
    "RandomSource",
    "RngSource",
    "SeededRandomSource",
    "Settings",
    "Sink",
    "SinkFullError",
    "SystemRandomSource",
    "UnknownAlphabetError",
    "URL",
    "alphabets",
    "as_random_source",
    "default_generator",
    "get_alphabet",
    "get_settings",
    "randoid",
    "with_alphabet",
    "with_size",
    "write_symbols",
]
