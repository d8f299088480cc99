"""Shared fixtures: random sources with observable behavior."""

from collections.abc import Iterable

import pytest

from randoid.random_source import Buffer, RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays a fixed byte stream and records every fill request."""

    def __init__(self, data: Iterable[int]):
        self._data = list(data)
        self._position = 0
        self.fills: list[int] = []

    @property
    def consumed(self) -> int:
        return self._position

    def fill(self, buffer: Buffer) -> None:
        end = self._position + len(buffer)
        if end > len(self._data):
            raise AssertionError(f"Scripted stream exhausted after {len(self._data)} bytes")
        buffer[:] = bytes(self._data[self._position : end])
        self._position = end
        self.fills.append(len(buffer))


class CountingRandomSource(RandomSource):
    """Wraps another source and counts the bytes drawn from it."""

    def __init__(self, inner: RandomSource):
        self.inner = inner
        self.consumed = 0
        self.fills: list[int] = []

    def fill(self, buffer: Buffer) -> None:
        self.inner.fill(buffer)
        self.consumed += len(buffer)
        self.fills.append(len(buffer))


class ExplodingRandomSource(RandomSource):
    """Fails the test if any randomness is requested."""

    def fill(self, buffer: Buffer) -> None:
        raise AssertionError("random source must not be used")


@pytest.fixture
def scripted_source():
    return ScriptedRandomSource


@pytest.fixture
def counting_source():
    return CountingRandomSource


@pytest.fixture
def exploding_source() -> ExplodingRandomSource:
    return ExplodingRandomSource()
