"""Magic-prefix generator plugin for SeedGen.

Register as "magic_png" and "magic_elf". Each input starts with a file-format
magic number followed by random bytes drawn by a native RandBytesGenerator,
so foreign code composes native strategies through the exported types.
"""

from __future__ import annotations

from seedgen.core.registry import GeneratorRegistry
from seedgen.generation.bridge import register as export_types

_types: dict = {}
export_types(_types)


class MagicPrefixGenerator:
    """Foreign generator prepending a fixed magic number to random bytes."""

    def __init__(self, magic: bytes, max_size: int = 32) -> None:
        self.magic = magic
        self.body = _types["RandBytesGenerator"](max_size).as_generator()

    def generate(self, state) -> bytes:
        return self.magic + self.body.generate(state).as_bytes()

    def generate_dummy(self, state) -> bytes:
        return self.magic + self.body.generate_dummy(state).as_bytes()


def register(registry: GeneratorRegistry) -> None:
    """Register the PNG and ELF magic-prefix generators."""
    registry.register_generator("magic_png", MagicPrefixGenerator, magic=b"\x89PNG\r\n\x1a\n")
    registry.register_generator("magic_elf", MagicPrefixGenerator, magic=b"\x7fELF")
