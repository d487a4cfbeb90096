"""Generator plugin discovery and loading from plugin directories."""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from pathlib import Path
from types import ModuleType

from seedgen.core.exceptions import PluginLoadError
from seedgen.core.registry import GeneratorRegistry
from seedgen.core.schema import PluginInfo

log = logging.getLogger(__name__)


def plugin_module_name(path: Path) -> str:
    """Module name for a plugin file, stable for a given resolved path."""
    digest = hashlib.sha1(str(Path(path).resolve()).encode()).hexdigest()[:12]
    return f"seedgen_plugin_{Path(path).stem}_{digest}"


def _plugin_info(path: Path, plugin_dir: Path | None = None) -> PluginInfo:
    path = Path(path).resolve()
    return PluginInfo(
        name=path.stem,
        path=path,
        module_name=plugin_module_name(path),
        plugin_type="root" if plugin_dir is not None and path.parent == plugin_dir else path.parent.name,
    )


class PluginLoader:
    """Imports generator plugins and lets each register its generators.

    A plugin is a module exposing ``register(registry)``. The names it adds to
    the registry are recorded in :attr:`PluginInfo.generators`; objects it
    registers that are not native strategies are used as foreign generators
    through :class:`~seedgen.generation.bridge.GeneratorBridge`.
    """

    def __init__(
        self,
        plugin_dirs: list[Path],
        registry: GeneratorRegistry,
    ) -> None:
        self._plugin_dirs = [Path(d).resolve() for d in plugin_dirs]
        self._registry = registry
        self._loaded: list[PluginInfo] = []
        self.load_errors: list[tuple[Path, PluginLoadError]] = []

    @property
    def loaded(self) -> list[PluginInfo]:
        return list(self._loaded)

    def discover_plugins(self) -> list[PluginInfo]:
        """Non-private ``*.py`` files under the plugin directories, in path order."""
        discovered: list[PluginInfo] = []
        for plugin_dir in self._plugin_dirs:
            if not plugin_dir.is_dir():
                continue
            for path in sorted(plugin_dir.rglob("*.py")):
                if not path.name.startswith("_"):
                    discovered.append(_plugin_info(path, plugin_dir))
        return discovered

    def _import(self, info: PluginInfo) -> ModuleType:
        spec = importlib.util.spec_from_file_location(info.module_name, info.path)
        if spec is None or spec.loader is None:
            raise PluginLoadError(f"Could not load spec for: {info.path}")
        mod = importlib.util.module_from_spec(spec)
        sys.modules[info.module_name] = mod
        try:
            spec.loader.exec_module(mod)
        except Exception as e:
            sys.modules.pop(info.module_name, None)
            raise PluginLoadError(f"Failed to load plugin {info.path}: {e}") from e
        return mod

    def load_plugin(self, plugin_path: Path, info: PluginInfo | None = None) -> PluginInfo:
        """Import one plugin, call its register(registry) and record what it added."""
        if info is None:
            if not Path(plugin_path).exists():
                raise PluginLoadError(f"Plugin path does not exist: {Path(plugin_path).resolve()}")
            info = _plugin_info(plugin_path)

        mod = self._import(info)
        register = getattr(mod, "register", None)
        if not callable(register):
            raise PluginLoadError(f"Plugin has no register() function: {info.path}")

        before = set(self._registry.list_available())
        try:
            register(self._registry)
        except Exception as e:
            raise PluginLoadError(f"Plugin register() failed for {info.path}: {e}") from e

        info.generators = [n for n in self._registry.list_available() if n not in before]
        if info.generators:
            log.debug("Plugin %s registered generators: %s", info.name, ", ".join(info.generators))
        else:
            log.warning("Plugin %s registered no new generators", info.name)
        self._loaded.append(info)
        return info

    def load_all(self) -> list[PluginInfo]:
        """Load every discovered plugin; failures are logged and kept in ``load_errors``."""
        self._loaded = []
        self.load_errors = []
        for info in self.discover_plugins():
            try:
                self.load_plugin(info.path, info)
            except PluginLoadError as e:
                log.warning("Failed to load plugin %s: %s", info.path, e)
                self.load_errors.append((info.path, e))
        if self.load_errors:
            log.warning("%d plugin(s) failed to load", len(self.load_errors))
        return self.loaded

    def generator_sources(self) -> dict[str, str]:
        """Map each plugin-supplied generator name to the plugin that registered it."""
        return {gen: info.name for info in self._loaded for gen in info.generators}
