"""Tests for CLI commands."""

from __future__ import annotations

import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from seedgen.cli import main

HEX_LINE = re.compile(r"^[0-9a-f]+$")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An isolated project root with a pyproject.toml and no config."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
    return tmp_path


def _hex_lines(output: str) -> list[str]:
    return [line for line in output.splitlines() if HEX_LINE.match(line)]


def test_cli_version(runner: CliRunner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_cli_generators_list_builtin(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generators", "list"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "Available generators" in result.output
    assert "rand_bytes" in result.output
    assert "rand_printables" in result.output


def test_cli_generators_list_with_plugin(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    plugins_dir = project / "plugins" / "generators"
    plugins_dir.mkdir(parents=True)
    (plugins_dir / "mock_plugin.py").write_text("""
def register(registry):
    from tests.test_registry import _MockForeign
    registry.register_generator("mock_foreign", _MockForeign)
""")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generators", "list"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "mock_foreign" in result.output


def test_cli_generate_dummy(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "--max-size", "5", "--count", "2", "--dummy"], catch_exceptions=False)
    assert result.exit_code == 0
    assert _hex_lines(result.output) == ["0000000000", "0000000000"]
    assert "Generated 2 input(s) with rand_bytes" in result.output


def test_cli_generate_is_reproducible_with_seed(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    args = ["generate", "-g", "rand_printables", "--max-size", "20", "-n", "4", "--seed", "123"]
    first = runner.invoke(main, args, catch_exceptions=False)
    second = runner.invoke(main, args, catch_exceptions=False)
    assert first.exit_code == 0
    assert len(_hex_lines(first.output)) == 4
    assert _hex_lines(first.output) == _hex_lines(second.output)


def test_cli_generate_generalized(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    result = runner.invoke(
        main, ["generate", "--max-size", "3", "-n", "1", "--dummy", "--generalized"], catch_exceptions=False
    )
    assert result.exit_code == 0
    assert _hex_lines(result.output) == ["000000"]


def test_cli_generate_uses_config(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (project / "config").mkdir()
    (project / "config" / "default.yaml").write_text("generator:\n  max_size: 4\n  count: 3\n  dummy: true\n")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate"], catch_exceptions=False)
    assert result.exit_code == 0
    assert _hex_lines(result.output) == ["00000000"] * 3


def test_cli_generate_unknown_generator(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "-g", "nope"])
    assert result.exit_code == 1
    assert "Unknown generator: nope" in result.output


def test_cli_generate_foreign_failure_exits_nonzero(
    runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    plugins_dir = project / "plugins"
    plugins_dir.mkdir()
    (plugins_dir / "broken_gen.py").write_text("""
class Broken:
    def __init__(self, max_size=8):
        pass

    def generate(self, state):
        return "not bytes"

    def generate_dummy(self, state):
        return b""


def register(registry):
    registry.register_generator("broken", Broken)
""")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "-g", "broken", "-n", "1"])
    assert result.exit_code == 1
    assert "Foreign generator call generate() failed" in result.output


def test_cli_generate_writes_log_file(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    log_file = project / "seed.log"
    result = runner.invoke(
        main, ["generate", "-n", "1", "--seed", "5", "--log-file", str(log_file), "-v"], catch_exceptions=False
    )
    assert result.exit_code == 0
    content = log_file.read_text(encoding="utf-8")
    assert "Seeding with rand_bytes" in content
    assert "Dispatching generate() to rand_bytes" in content


def test_cli_generate_repr_format(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "--max-size", "2", "-n", "1", "--dummy", "--format", "repr"])
    assert result.exit_code == 0
    assert "b'\\x00\\x00'" in result.output


def test_cli_generators_list_shows_sources(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    plugins_dir = project / "plugins"
    plugins_dir.mkdir()
    (plugins_dir / "sourced.py").write_text("""
def register(registry):
    from tests.test_registry import _MockForeign
    registry.register_generator("sourced_gen", _MockForeign)
""")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generators", "list"], catch_exceptions=False)
    assert result.exit_code == 0
    assert "  rand_bytes (built-in)" in result.output
    assert "  sourced_gen (sourced)" in result.output


def test_cli_generate_factory_error_exits_nonzero(
    runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    plugins_dir = project / "plugins"
    plugins_dir.mkdir()
    (plugins_dir / "picky_gen.py").write_text("""
class Picky:
    def __init__(self, max_size=8):
        raise ValueError("max_size too small")


def register(registry):
    registry.register_generator("picky", Picky)
""")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "-g", "picky", "-n", "1"])
    assert result.exit_code == 1
    assert "Error: Cannot instantiate generator picky" in result.output
    assert "max_size too small" in result.output


def test_cli_generate_log_file_in_missing_dir(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(project)
    log_file = project / "missing" / "seed.log"
    result = runner.invoke(main, ["generate", "-n", "1", "--log-file", str(log_file)])
    assert result.exit_code == 1
    assert "Cannot open log file" in result.output
    assert not isinstance(result.exception, FileNotFoundError)


def test_cli_invalid_log_level_in_config(runner: CliRunner, project: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (project / "config").mkdir()
    (project / "config" / "default.yaml").write_text("log_level: chatty\n")
    monkeypatch.chdir(project)
    result = runner.invoke(main, ["generate", "-n", "1"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
