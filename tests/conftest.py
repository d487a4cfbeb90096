"""Shared pytest fixtures for SeedGen tests.

Factory functions live in ``_helpers.py``; this module re-exports them as
pytest fixtures so tests can receive them via dependency injection.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from seedgen.core.config import ConfigManager
from seedgen.core.rand import StdState
from seedgen.core.registry import GeneratorRegistry

from _helpers import (  # noqa: F401 — re-export for fixture use
    make_config_manager,
    make_counting_state,
    make_registry,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def counting_state() -> StdState:
    """A StdState whose RNG counts its draws."""
    return make_counting_state()


@pytest.fixture()
def registry() -> GeneratorRegistry:
    """A registry with the built-in generators registered."""
    return make_registry()


@pytest.fixture()
def config_manager(tmp_path: Path) -> ConfigManager:
    """A real ConfigManager backed by default config (no YAML/env file)."""
    return make_config_manager(tmp_path)
