"""Seeding loop: draw a batch of initial inputs from a generator."""

from __future__ import annotations

import logging
from typing import Any

from seedgen.core.exceptions import GeneratorError
from seedgen.core.schema import SeedingReport
from seedgen.protocols.generator import Generator, HasRand

log = logging.getLogger(__name__)


def generate_inputs(
    generator: Generator,
    state: HasRand,
    count: int,
    *,
    dummy: bool = False,
) -> list[Any]:
    """Call ``generate`` (or ``generate_dummy``) ``count`` times, returning inputs in order.

    A :class:`GeneratorError` propagates to the caller, which decides whether
    to retry or abort seeding.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    produce = generator.generate_dummy if dummy else generator.generate
    inputs: list[Any] = []
    for idx in range(count):
        try:
            inputs.append(produce(state))
        except GeneratorError:
            log.error("Generator %r failed on input %d of %d", generator, idx + 1, count)
            raise
    log.info("Generated %d %sinput(s)", len(inputs), "dummy " if dummy else "")
    return inputs


def summarize(name: str, inputs: list[Any], *, dummy: bool = False) -> SeedingReport:
    """Build a :class:`SeedingReport` for a batch of generated inputs."""
    lengths = [len(inp) for inp in inputs]
    return SeedingReport(
        generator=name,
        count=len(inputs),
        dummy=dummy,
        min_len=min(lengths, default=0),
        max_len=max(lengths, default=0),
        total_bytes=sum(lengths),
        names=[inp.generate_name(idx) for idx, inp in enumerate(inputs)],
    )
