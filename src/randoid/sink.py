"""Destinations for generated symbols.

A sink is any object with a ``write(text)`` method: ``io.StringIO``, an open
text file, ``sys.stdout``, or :class:`BoundedSink`. Whatever a sink raises
propagates out of the generation call unchanged.
"""

from typing import Protocol

from randoid.exceptions import SinkFullError


class Sink(Protocol):
    """Anything that accepts text."""

    def write(self, text: str, /) -> object: ...


class BoundedSink:
    """A sink with a fixed capacity, counted in characters.

    A write that would overflow the capacity stores nothing and raises
    :class:`SinkFullError`, leaving earlier writes in place.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._parts: list[str] = []
        self._length = 0

    def write(self, text: str) -> int:
        if self._length + len(text) > self.capacity:
            raise SinkFullError(self.capacity)
        self._parts.append(text)
        self._length += len(text)
        return len(text)

    def __len__(self) -> int:
        return self._length

    def getvalue(self) -> str:
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()
        self._length = 0
