"""CLI entry point for SeedGen."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from seedgen import __version__
from seedgen.core.config import ConfigManager
from seedgen.core.exceptions import ConfigError, GeneratorError, RegistryError
from seedgen.core.plugin_loader import PluginLoader
from seedgen.core.rand import StdState
from seedgen.core.registry import GeneratorRegistry
from seedgen.core.seed_log import SeedRunLog
from seedgen.core.seeding import generate_inputs, summarize
from seedgen.generation import GeneralizedInputBytesGenerator, register_builtin_generators


def _load_config_and_plugins(
    project_root: Path | None = None,
) -> tuple[ConfigManager, GeneratorRegistry, PluginLoader | None]:
    """Load config and discover/load plugins; return config, registry and the plugin loader."""
    config = ConfigManager(project_root=project_root)
    try:
        config.load()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    logging.basicConfig(level=config.config.log_level, format="%(levelname)s %(name)s: %(message)s")
    registry = GeneratorRegistry()
    register_builtin_generators(registry)
    loader = None
    plugin_dirs = [p for p in config.plugin_paths() if p.exists()]
    if plugin_dirs:
        loader = PluginLoader(plugin_dirs, registry)
        loader.load_all()
    return config, registry, loader


def _format_input(data: bytes, fmt: str) -> str:
    if fmt == "hex":
        return data.hex()
    return repr(data)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """SeedGen: pluggable input generators for fuzzing corpus seeding."""
    pass


@main.group()
def generators() -> None:
    """List or inspect generators."""
    pass


@generators.command("list")
def generators_list() -> None:
    """List available generators (built-in and plugin-supplied)."""
    _, registry, loader = _load_config_and_plugins()
    sources = loader.generator_sources() if loader else {}
    names = registry.list_available()
    click.echo("Available generators:")
    if not names:
        click.echo("  (none)")
    for name in names:
        click.echo(f"  {name} ({sources.get(name, 'built-in')})")


@main.command()
@click.option("--generator", "-g", "generator_name", help="Registered generator name (default from config).")
@click.option("--max-size", type=click.IntRange(min=0), help="Exclusive upper bound on input length.")
@click.option("--count", "-n", type=click.IntRange(min=0), help="Number of inputs to generate.")
@click.option("--seed", type=int, help="RNG seed (default: current time).")
@click.option("--dummy", is_flag=True, help="Generate dummy placeholder inputs (no RNG draws).")
@click.option("--generalized", is_flag=True, help="Wrap the generator to emit generalized inputs.")
@click.option("--format", "fmt", type=click.Choice(["hex", "repr"]), default="hex", show_default=True, help="Output format for each input.")
@click.option("--log-file", type=click.Path(path_type=Path, dir_okay=False), help="Write the seeding log to this file.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose seeding log (DEBUG level, includes dispatch details).")
def generate(
    generator_name: str | None,
    max_size: int | None,
    count: int | None,
    seed: int | None,
    dummy: bool,
    generalized: bool,
    fmt: str,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Generate seed inputs and print one per line."""
    config, registry, _ = _load_config_and_plugins()
    cfg = config.config.generator
    name = generator_name or cfg.name
    max_size = cfg.max_size if max_size is None else max_size
    count = cfg.count if count is None else count
    seed = cfg.seed if seed is None else seed
    dummy = dummy or cfg.dummy
    generalized = generalized or cfg.generalized

    try:
        with SeedRunLog(log_file, verbose=verbose) as run_log:
            gen = registry.get_generator(name, max_size=max_size)
            source = GeneralizedInputBytesGenerator(gen) if generalized else gen
            state = StdState(seed=seed)
            run_log.start(name, max_size=max_size, count=count, seed=state.rand.seed, dummy=dummy)
            inputs = generate_inputs(source, state, count, dummy=dummy)
            report = summarize(name, inputs, dummy=dummy)
            run_log.finish(report)
    except (ConfigError, RegistryError, GeneratorError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    for inp in inputs:
        click.echo(_format_input(inp.as_bytes(), fmt))
    click.echo(
        f"Generated {report.count} input(s) with {name}: "
        f"lengths {report.min_len}..{report.max_len}, {report.total_bytes} byte(s) total.",
        err=True,
    )
