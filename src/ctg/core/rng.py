"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import string
from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")

_ID_ALPHABET = string.ascii_letters + string.digits


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def random_id(self, length: int = 16) -> str:
        """Return an alphanumeric identifier of the requested length."""
        if length <= 0:
            raise ValueError("Identifier length must be positive.")
        return "".join(self.choice(_ID_ALPHABET) for _ in range(length))
