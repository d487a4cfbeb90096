"""Reference random-number source and fuzzing state."""

from __future__ import annotations

import random
import time
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


def current_nanos() -> int:
    """Current wall-clock time in nanoseconds, used as the default seed."""
    return time.time_ns()


class StdRand:
    """Seedable RNG implementing the ``Rand`` protocol on top of :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = current_nanos() if seed is None else seed
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Reseed the generator; the draw sequence restarts."""
        self._seed = seed
        self._rng.seed(seed)

    def below(self, bound: int) -> int:
        """Uniform integer in ``[0, bound)``; 0 when ``bound`` is 0 or 1."""
        if bound < 0:
            raise ValueError(f"bound must be non-negative, got {bound}")
        if bound <= 1:
            return 0
        return self._rng.randrange(bound)

    def choose(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.below(len(items))]


class StdState:
    """Minimal fuzzing state: owns the RNG plus free-form engine metadata."""

    def __init__(self, rand: Any = None, seed: int | None = None) -> None:
        self.rand = rand if rand is not None else StdRand(seed)
        self.metadata: dict[str, Any] = {}

    def __repr__(self) -> str:
        return f"StdState(rand={self.rand!r})"
