"""Framework core: registry, plugin loader, schema, config, RNG and seeding loop."""

from seedgen.core.config import AppConfig, ConfigManager
from seedgen.core.plugin_loader import PluginLoader
from seedgen.core.rand import StdRand, StdState
from seedgen.core.registry import GeneratorRegistry
from seedgen.core.schema import (
    BytesInput,
    GeneralizedInput,
    GeneralizedItem,
    PluginInfo,
    SeedingReport,
)
from seedgen.core.seeding import generate_inputs, summarize

__all__ = [
    "AppConfig",
    "BytesInput",
    "ConfigManager",
    "GeneralizedInput",
    "GeneralizedItem",
    "GeneratorRegistry",
    "PluginInfo",
    "PluginLoader",
    "SeedingReport",
    "StdRand",
    "StdState",
    "generate_inputs",
    "summarize",
]
