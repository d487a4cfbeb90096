"""Built-in generators, the generalized-input adapter and the foreign bridge."""

from seedgen.generation.bridge import (
    ForeignGenerator,
    GeneratorBridge,
    GeneratorKind,
    StateHandle,
    foreign_lock,
    register,
)
from seedgen.generation.generalized import GeneralizedInputBytesGenerator
from seedgen.generation.rand_generators import (
    DUMMY_BYTES_MAX,
    PRINTABLES,
    RandBytesGenerator,
    RandPrintablesGenerator,
)


def register_builtin_generators(registry) -> None:
    """Register built-in generators on the given registry."""
    registry.register_generator("rand_bytes", RandBytesGenerator)
    registry.register_generator("rand_printables", RandPrintablesGenerator)


__all__ = [
    "DUMMY_BYTES_MAX",
    "PRINTABLES",
    "ForeignGenerator",
    "GeneralizedInputBytesGenerator",
    "GeneratorBridge",
    "GeneratorKind",
    "RandBytesGenerator",
    "RandPrintablesGenerator",
    "StateHandle",
    "foreign_lock",
    "register",
    "register_builtin_generators",
]
