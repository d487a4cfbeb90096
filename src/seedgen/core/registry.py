"""Central registry for generator factories."""

from __future__ import annotations

import logging
from typing import Any, Callable

from seedgen.core.exceptions import RegistryError
from seedgen.generation.bridge import GeneratorBridge
from seedgen.generation.rand_generators import RandBytesGenerator, RandPrintablesGenerator

log = logging.getLogger(__name__)

_NATIVE_TYPES = (RandBytesGenerator, RandPrintablesGenerator)


class GeneratorRegistry:
    """Maps generator names to factories (classes or callables).

    Native strategies come out of :meth:`get_generator` as native bridge
    variants; any other object is wrapped as a foreign generator.
    """

    def __init__(self) -> None:
        self._generators: dict[str, Callable[..., Any]] = {}
        self._generator_options: dict[str, dict[str, Any]] = {}

    def register_generator(self, name: str, factory: Callable[..., Any], **options: Any) -> None:
        """Register a generator factory; ``options`` are default constructor kwargs."""
        if not callable(factory):
            raise RegistryError(f"Generator factory for {name!r} is not callable")
        if name in self._generators:
            log.warning("Overwriting generator registration: %s", name)
        self._generators[name] = factory
        if options:
            self._generator_options[name] = options
        else:
            self._generator_options.pop(name, None)

    def get_generator(self, name: str, **kwargs: Any) -> GeneratorBridge:
        """Instantiate a generator by name and wrap it in a :class:`GeneratorBridge`."""
        if name not in self._generators:
            raise RegistryError(f"Unknown generator: {name}")
        factory = self._generators[name]
        opts = {**self._generator_options.get(name, {}), **kwargs}
        try:
            obj = factory(**opts)
        except Exception as e:
            raise RegistryError(f"Cannot instantiate generator {name}: {type(e).__name__}: {e}") from e
        if isinstance(obj, GeneratorBridge):
            return obj
        if isinstance(obj, _NATIVE_TYPES):
            return GeneratorBridge.from_native(obj)
        log.debug("Wrapping %s as foreign generator %s", type(obj).__name__, name)
        return GeneratorBridge.new_foreign(obj)

    def __contains__(self, name: object) -> bool:
        return name in self._generators

    def list_available(self) -> list[str]:
        """Return all registered generator names."""
        return list(self._generators)
