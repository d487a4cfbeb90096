"""Protocol interfaces for pluggable components."""

from seedgen.protocols.generator import Generator, HasRand, Rand

__all__ = [
    "Generator",
    "HasRand",
    "Rand",
]
