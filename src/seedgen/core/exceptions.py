"""Custom exception hierarchy for SeedGen."""

from __future__ import annotations


class SeedGenError(Exception):
    """Base exception for SeedGen."""

    pass


class ConfigError(SeedGenError):
    """Raised when configuration loading or validation fails."""

    pass


class RegistryError(SeedGenError):
    """Raised when a generator is not found or registration fails."""

    pass


class PluginLoadError(SeedGenError):
    """Raised when a plugin fails to load."""

    pass


class GeneratorError(SeedGenError):
    """Raised when a generator fails to produce an input."""

    pass


class ForeignCallError(GeneratorError):
    """Raised when a call into a foreign generator object fails.

    Covers a missing or non-callable member, an exception raised by the
    foreign code, and a return value that cannot be read as bytes.
    """

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"Foreign generator call {method}() failed: {message}")
        self.method = method
