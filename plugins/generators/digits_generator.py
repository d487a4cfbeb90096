"""Decimal-digit generator plugin for SeedGen.

Register as "digits". Produces ASCII decimal numbers, optionally signed,
useful for seeding parsers of numeric fields. Used through the foreign
generator bridge: it only sees the state handle and returns plain bytes.
"""

from __future__ import annotations

from seedgen.core.registry import GeneratorRegistry

DIGITS = b"0123456789"


class DigitsGenerator:
    """Foreign generator producing up to ``max_size - 1`` ASCII digits."""

    def __init__(self, max_size: int = 16, signed: bool = True) -> None:
        self.max_size = max_size
        self.signed = signed

    def generate(self, state) -> bytes:
        rand = state.rand
        size = max(rand.below(self.max_size), 1)
        out = bytearray(rand.choose(DIGITS) for _ in range(size))
        if self.signed and size > 1 and rand.below(2):
            out[0] = ord("-")
        return bytes(out)

    def generate_dummy(self, state) -> bytes:
        return b"0" * min(self.max_size, 64)


def register(registry: GeneratorRegistry) -> None:
    """Register the digits generator."""
    registry.register_generator("digits", DigitsGenerator)
