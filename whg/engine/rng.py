"""Seedable randomness boundary for coin flips, boss decisions and loot."""
from __future__ import annotations

import secrets
from collections.abc import Sequence
from random import Random
from typing import TypeVar

T = TypeVar("T")


class RNG:
    """Wrapper around random.Random; swap in a subclass to script outcomes."""

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed if seed is not None else secrets.randbits(32)
        self._random = Random(self.seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def sample(self, seq: Sequence[T], k: int) -> list[T]:
        """Pick k distinct elements, in draw order."""
        return self._random.sample(list(seq), k)
