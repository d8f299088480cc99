"""Zero-configuration helpers.

These functions bind the generator to the configured defaults (see
:mod:`randoid.settings`): url-safe alphabet, 21 symbols and the operating
system's random source unless the environment says otherwise. Each call
builds a new random source, so nothing is shared between callers or threads.
"""

from typing import Any

from randoid.alphabet import Alphabet
from randoid.alphabets import get_alphabet
from randoid.generator import Generator
from randoid.settings import Settings, get_settings, make_random_source


def default_generator(settings: Settings | None = None) -> Generator:
    """Create a generator from settings (the cached settings if omitted)."""
    settings = settings or get_settings()
    return Generator(settings.size, get_alphabet(settings.alphabet), make_random_source(settings))


def with_size(size: int, settings: Settings | None = None) -> Generator:
    """Create a default generator producing ids of ``size`` symbols."""
    return default_generator(settings).with_size(size)


def with_alphabet(alphabet: Alphabet, settings: Settings | None = None) -> Generator:
    """Create a default generator drawing from ``alphabet``."""
    return default_generator(settings).with_alphabet(alphabet)


def randoid(size: int | None = None, alphabet: Alphabet | None = None, random: Any = None) -> str:
    """Generate one id, filling in defaults for anything not given.

    Args:
        size: Number of symbols (default: configured size, 21)
        alphabet: Alphabet to use (default: configured alphabet, url-safe)
        random: Random source (default: a new configured source)

    Returns:
        The generated id

    Examples:
        >>> len(randoid())
        21
        >>> from randoid import HEX
        >>> len(randoid(8, HEX))
        8
    """
    settings = get_settings()
    generator = Generator(
        settings.size if size is None else size,
        alphabet or get_alphabet(settings.alphabet),
        make_random_source(settings) if random is None else random,
    )
    return generator.gen_id()
