"""Shared pytest fixtures for passgen tests."""

from __future__ import annotations

from typing import Callable, Iterable, List

import pytest

from password_generator import SeededRandomSource


class ScriptedRandomSource:
    """Returns a fixed sequence of draws and records the bounds asked for."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.bounds: List[int] = []

    def randbelow(self, n: int) -> int:
        if not self._values:
            raise AssertionError(f"no scripted value left for randbelow({n})")
        value = self._values.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        self.bounds.append(n)
        return value

    @property
    def exhausted(self) -> bool:
        return not self._values


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandomSource]:
    """Factory for deterministic sources.

    Returns:
        Callable taking the draws to return, in order
    """

    def make(*values: int) -> ScriptedRandomSource:
        return ScriptedRandomSource(values)

    return make


@pytest.fixture
def seeded_rng() -> SeededRandomSource:
    """Reproducible random source for statistical tests."""
    return SeededRandomSource(20240601)
