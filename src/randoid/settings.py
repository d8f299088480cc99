"""Configuration for the convenience layer using Pydantic Settings.

Only :mod:`randoid.defaults` and the CLI read these values; the generator and
engine are always configured explicitly. Values can be provided via
environment variables or fall back to the defaults below.

Environment variable prefix: ``RANDOID_`` (e.g. ``RANDOID_SIZE``).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from randoid.alphabets import ALPHABETS
from randoid.random_source import RandomSource, SeededRandomSource, SystemRandomSource


class Settings(BaseSettings):
    """Defaults used when ids are generated without explicit configuration.

    Attributes map directly to environment variables using the ``RANDOID_``
    prefix (case-insensitive). For example, ``size`` <- ``RANDOID_SIZE``.
    """

    size: int = Field(
        default=21,
        ge=0,
        description="Number of symbols in a generated id",
    )  # fmt: skip
    alphabet: str = Field(
        default="url",
        description="Name of the alphabet to draw symbols from",
    )  # fmt: skip
    random_source: Literal["system", "seeded"] = Field(
        default="system",
        description="Source of random bytes: system (OS CSPRNG) or seeded (reproducible)",
    )  # fmt: skip
    seed: int | None = Field(
        default=None,
        description="Seed for the seeded random source",
    )  # fmt: skip
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Log level used by the CLI",
    )

    @field_validator("alphabet", mode="before")
    @classmethod
    def validate_alphabet(cls, v: str | None) -> str:
        """Normalize and validate the alphabet name."""
        if v is None:
            return "url"

        name = str(v).lower()
        if name not in ALPHABETS:
            raise ValueError(f"Invalid alphabet: {v}. Must be one of: {', '.join(sorted(ALPHABETS))}")

        return name

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str:
        """Normalize and validate log level."""
        if v is None:
            return "INFO"

        v_upper = str(v).upper()

        allowed = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR"}
        if v_upper not in allowed:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {', '.join(sorted(allowed))}")

        return v_upper

    @model_validator(mode="after")
    def check_seed(self) -> "Settings":
        """A seeded source without a seed would silently be predictable."""
        if self.random_source == "seeded" and self.seed is None:
            raise ValueError("A seed is required when random_source is 'seeded'")
        return self

    model_config = SettingsConfigDict(
        env_prefix="RANDOID_",
        case_sensitive=False,
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached ``Settings`` instance.

    The first invocation reads environment variables / .env file; subsequent
    calls reuse the same object.
    """

    return Settings()


def make_random_source(settings: Settings) -> RandomSource:
    """Build a fresh random source as described by ``settings``.

    Every call returns a new, independent source. With the seeded source,
    two calls therefore produce identical byte streams.
    """
    if settings.random_source == "seeded":
        return SeededRandomSource(settings.seed)
    return SystemRandomSource()


__all__ = ["Settings", "get_settings", "make_random_source"]
