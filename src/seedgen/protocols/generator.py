"""Protocols for input generators and the state they draw randomness from."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Rand(Protocol):
    """Random-number source owned by the fuzzing state."""

    def below(self, bound: int) -> int:
        """Return an integer uniformly drawn from ``[0, bound)``."""
        ...

    def choose(self, items: Sequence[T]) -> T:
        """Return one element of ``items`` picked uniformly."""
        ...


class HasRand(Protocol):
    """Fuzzing state exposing its random-number source."""

    rand: Rand


class Generator(Protocol):
    """Protocol for input generators (native strategies, adapters, bridges).

    ``generate`` consumes RNG draws from ``state`` and raises
    :class:`~seedgen.core.exceptions.GeneratorError` on failure.
    ``generate_dummy`` returns a deterministic placeholder and must not draw
    from the RNG; ``state`` is passed for symmetry and so foreign
    implementations can inspect it.
    """

    def generate(self, state: HasRand) -> Any:
        """Generate a new input."""
        ...

    def generate_dummy(self, state: HasRand) -> Any:
        """Generate a new dummy input."""
        ...
