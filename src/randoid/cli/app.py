"""Main CLI application."""

from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from randoid.alphabet import Alphabet
from randoid.alphabets import ALPHABETS, get_alphabet
from randoid.exceptions import InvalidAlphabetError, UnknownAlphabetError
from randoid.generator import Generator
from randoid.logging import setup_logging
from randoid.random_source import SeededRandomSource
from randoid.settings import get_settings, make_random_source

app = typer.Typer(
    name="randoid",
    help="Generate short random ids from a custom alphabet",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


SIZE_OPTION = typer.Option(
    None,
    "--size",
    "-s",
    help="Number of symbols per id (overrides RANDOID_SIZE)",
    min=0,
    metavar="<n>",
)  # fmt: skip
ALPHABET_OPTION = typer.Option(
    None,
    "--alphabet",
    "-a",
    help="Named alphabet: url, hex, hex_upper (overrides RANDOID_ALPHABET)",
    metavar="<name>",
)  # fmt: skip
SYMBOLS_OPTION = typer.Option(
    None,
    "--symbols",
    help="Custom alphabet given as a string of distinct characters",
    metavar="<chars>",
)  # fmt: skip
COUNT_OPTION = typer.Option(
    1,
    "--count",
    "-n",
    help="Number of ids to generate",
    min=1,
    metavar="<k>",
)  # fmt: skip
SEED_OPTION = typer.Option(
    None,
    "--seed",
    help="Seed a reproducible random source (overrides RANDOID_SEED)",
    metavar="<seed>",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides RANDOID_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _resolve_alphabet(name: str | None, symbols: str | None, default: str) -> Alphabet:
    if symbols is not None:
        try:
            return Alphabet(symbols)
        except InvalidAlphabetError as e:
            _fail(str(e))
    try:
        return get_alphabet(name or default)
    except UnknownAlphabetError as e:
        _fail(str(e))


@app.command()
def generate(
    size: int | None = SIZE_OPTION,
    alphabet: str | None = ALPHABET_OPTION,
    symbols: str | None = SYMBOLS_OPTION,
    count: int = COUNT_OPTION,
    seed: int | None = SEED_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Generate ids and print them, one per line.

    Examples:
        randoid generate
        randoid generate --size 8 --alphabet hex --count 5
        randoid generate --symbols 0123456789 --seed 42
    """
    settings = get_settings()
    if log_level is not None:
        setup_logging(log_level, compact=True)

    chosen = _resolve_alphabet(alphabet, symbols, settings.alphabet)
    random = SeededRandomSource(seed) if seed is not None else make_random_source(settings)
    generator = Generator(settings.size if size is None else size, chosen, random)

    logger.info(f"Generating {count} id(s) of {generator.size} symbols")
    for _ in range(count):
        typer.echo(generator.gen_id())


@app.command()
def alphabets() -> None:
    """List the built-in alphabets."""
    table = Table(title="Alphabets")
    table.add_column("Name", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Path")
    table.add_column("Symbols", style="green")

    for name, alphabet in ALPHABETS.items():
        table.add_row(
            name,
            str(len(alphabet)),
            "fast" if alphabet.is_power_of_two else "generic",
            "".join(alphabet),
        )

    console.print(table)
