"""Exceptions raised by randoid.

Construction problems (bad alphabets, negative sizes) are programming errors
and surface immediately. Sink failures are never wrapped: whatever the sink
raises reaches the caller of the generation call unchanged.
"""


class RandoidError(Exception):
    """Base exception for all randoid errors."""


class InvalidAlphabetError(RandoidError, ValueError):
    """Raised when an alphabet cannot be used to generate ids.

    This occurs when:
    - The alphabet is empty
    - The alphabet has more than 255 symbols
    - The alphabet contains the same symbol twice
    - A symbol is not a non-empty string
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid alphabet: {reason}")


class UnknownAlphabetError(RandoidError, KeyError):
    """Raised when a named alphabet is not registered."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown alphabet: {name!r} (expected one of: {', '.join(known)})")

    def __str__(self) -> str:
        return self.args[0]


class SinkFullError(RandoidError):
    """Raised by a bounded sink when a write would exceed its capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Sink is full: capacity is {capacity} symbols")
