"""Pydantic models and data structures for the framework."""

from __future__ import annotations

import hashlib
from pathlib import Path

from pydantic import BaseModel, Field


class BytesInput(BaseModel):
    """An input made of a plain, owned byte sequence."""

    data: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> BytesInput:
        return cls(data=bytes(data))

    def as_bytes(self) -> bytes:
        return self.data

    def generate_name(self, idx: int = 0) -> str:
        """Stable name derived from the content (``idx`` is accepted for corpus APIs)."""
        return hashlib.sha1(self.data).hexdigest()[:16]

    def __len__(self) -> int:
        return len(self.data)


class GeneralizedItem(BaseModel):
    """One part of a generalized input: a chunk of bytes, or a gap when ``data`` is None."""

    data: bytes | None = None


class GeneralizedInput(BaseModel):
    """Bytes input carrying an optional structural (generalized) view of its content."""

    data: bytes = b""
    generalized: list[GeneralizedItem] | None = None
    grimoire_mutated: bool = False

    @classmethod
    def from_bytes_input(cls, bytes_input: BytesInput) -> GeneralizedInput:
        """Lossless conversion from a :class:`BytesInput`; no generalization yet."""
        return cls(data=bytes_input.data)

    def as_bytes(self) -> bytes:
        return self.data

    def generate_name(self, idx: int = 0) -> str:
        return hashlib.sha1(self.data).hexdigest()[:16]

    def __len__(self) -> int:
        return len(self.data)


class PluginInfo(BaseModel):
    """A generator plugin module and the generator names it registered."""

    name: str
    path: Path
    module_name: str
    plugin_type: str = ""
    generators: list[str] = Field(default_factory=list)


class SeedingReport(BaseModel):
    """Summary of one seeding run."""

    generator: str
    count: int = 0
    dummy: bool = False
    min_len: int = 0
    max_len: int = 0
    total_bytes: int = 0
    names: list[str] = Field(default_factory=list)
