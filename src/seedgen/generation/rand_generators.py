"""Native randomized generators: random bytes and random printable characters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from seedgen.core.schema import BytesInput
from seedgen.protocols.generator import HasRand

if TYPE_CHECKING:
    from seedgen.generation.bridge import GeneratorBridge

# Maximum size of the dummy inputs returned by ``generate_dummy``
DUMMY_BYTES_MAX = 64

PRINTABLES = (
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz \t\n"
    b"!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
)


def _draw_size(state: HasRand, max_size: int) -> int:
    size = state.rand.below(max_size)
    if size == 0:
        size = 1
    return size


class _RandGenerator:
    """Shared sizing and dummy policy of the native generators."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    def generate_dummy(self, state: HasRand) -> BytesInput:
        """Up to ``DUMMY_BYTES_MAX`` zero bytes; the RNG is not touched."""
        return BytesInput(data=bytes(min(self._max_size, DUMMY_BYTES_MAX)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(max_size={self._max_size})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._max_size == other._max_size  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._max_size))


class RandBytesGenerator(_RandGenerator):
    """Generates random bytes, up to ``max_size`` (exclusive) of them."""

    def generate(self, state: HasRand) -> BytesInput:
        size = _draw_size(state, self._max_size)
        rand = state.rand
        return BytesInput(data=bytes(rand.below(256) for _ in range(size)))

    def as_generator(self) -> GeneratorBridge:
        from seedgen.generation.bridge import GeneratorBridge

        return GeneratorBridge.new_rand_bytes(self)


class RandPrintablesGenerator(_RandGenerator):
    """Generates random printable characters, up to ``max_size`` (exclusive) of them.

    Dummy inputs are zero bytes, not printable characters.
    """

    def generate(self, state: HasRand) -> BytesInput:
        size = _draw_size(state, self._max_size)
        rand = state.rand
        return BytesInput(data=bytes(rand.choose(PRINTABLES) for _ in range(size)))

    def as_generator(self) -> GeneratorBridge:
        from seedgen.generation.bridge import GeneratorBridge

        return GeneratorBridge.new_rand_printables(self)
