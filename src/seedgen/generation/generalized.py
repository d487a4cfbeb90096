"""Adapter turning a bytes generator into a generator of generalized inputs."""

from __future__ import annotations

from seedgen.core.schema import GeneralizedInput
from seedgen.protocols.generator import Generator, HasRand


class GeneralizedInputBytesGenerator:
    """Produces :class:`GeneralizedInput` values from a wrapped :class:`BytesInput` generator.

    Both operations forward to the inner generator unchanged; errors it
    raises propagate as they are.
    """

    def __init__(self, bytes_generator: Generator) -> None:
        self._bytes_generator = bytes_generator

    @classmethod
    def from_generator(cls, bytes_generator: Generator) -> GeneralizedInputBytesGenerator:
        return cls(bytes_generator)

    @property
    def bytes_generator(self) -> Generator:
        return self._bytes_generator

    def generate(self, state: HasRand) -> GeneralizedInput:
        return GeneralizedInput.from_bytes_input(self._bytes_generator.generate(state))

    def generate_dummy(self, state: HasRand) -> GeneralizedInput:
        return GeneralizedInput.from_bytes_input(self._bytes_generator.generate_dummy(state))

    def __repr__(self) -> str:
        return f"GeneralizedInputBytesGenerator({self._bytes_generator!r})"
