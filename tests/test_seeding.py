"""Tests for the seeding loop."""

from __future__ import annotations

import pytest

from seedgen.core.exceptions import ForeignCallError
from seedgen.core.rand import StdState
from seedgen.core.schema import BytesInput
from seedgen.core.seeding import generate_inputs, summarize
from seedgen.generation.bridge import GeneratorBridge
from seedgen.generation.rand_generators import RandBytesGenerator

from _helpers import EchoForeign


def test_generate_inputs_count_and_order() -> None:
    gen = RandBytesGenerator(20)
    inputs = generate_inputs(gen, StdState(seed=5), 6)
    expected_state = StdState(seed=5)
    assert inputs == [gen.generate(expected_state) for _ in range(6)]


def test_generate_inputs_dummy(counting_state: StdState) -> None:
    inputs = generate_inputs(RandBytesGenerator(3), counting_state, 4, dummy=True)
    assert [i.as_bytes() for i in inputs] == [b"\x00\x00\x00"] * 4
    assert counting_state.rand.draws == 0


def test_generate_inputs_zero_count() -> None:
    assert generate_inputs(RandBytesGenerator(3), StdState(seed=0), 0) == []


def test_generate_inputs_negative_count() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        generate_inputs(RandBytesGenerator(3), StdState(seed=0), -1)


def test_generate_inputs_propagates_generator_error(caplog: pytest.LogCaptureFixture) -> None:
    bridge = GeneratorBridge.new_foreign(EchoForeign(payload="not bytes"))
    with pytest.raises(ForeignCallError):
        generate_inputs(bridge, StdState(seed=0), 3)
    assert "failed on input 1 of 3" in caplog.text


def test_summarize() -> None:
    inputs = [BytesInput(data=b"a"), BytesInput(data=b"abcd"), BytesInput(data=b"ab")]
    report = summarize("rand_bytes", inputs)
    assert report.count == 3
    assert report.min_len == 1
    assert report.max_len == 4
    assert report.total_bytes == 7
    assert report.names == [inp.generate_name(0) for inp in inputs]


def test_summarize_empty() -> None:
    report = summarize("rand_bytes", [], dummy=True)
    assert report.count == 0
    assert report.min_len == 0
    assert report.max_len == 0
    assert report.dummy is True
