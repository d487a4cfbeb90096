"""Log of one seeding run: generator choice, dispatch details and the final report."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType

from seedgen.core.exceptions import ConfigError
from seedgen.core.schema import SeedingReport

LOGGER_NAME = "seedgen"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger() -> logging.Logger:
    """Return the package root logger."""
    return logging.getLogger(LOGGER_NAME)


class SeedRunLog:
    """Context manager recording a seeding run.

    With a ``log_file``, every ``seedgen.*`` record emitted inside the context
    is also written to that file (DEBUG and up when ``verbose``, which
    includes bridge dispatch). :meth:`start` and :meth:`finish` log the run
    parameters and its :class:`SeedingReport`.
    """

    def __init__(self, log_file: Path | None = None, verbose: bool = False) -> None:
        self.log_file = log_file
        self.verbose = verbose
        self._logger = logging.getLogger(f"{LOGGER_NAME}.run")
        self._handler: logging.FileHandler | None = None
        self._previous_level = logging.NOTSET

    def __enter__(self) -> SeedRunLog:
        if self.log_file is None:
            return self
        try:
            handler = logging.FileHandler(self.log_file, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot open log file {self.log_file}: {e}") from e
        level = logging.DEBUG if self.verbose else logging.INFO
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root = get_logger()
        self._previous_level = root.level
        root.setLevel(level)
        root.addHandler(handler)
        self._handler = handler
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if isinstance(exc, Exception):
            self._logger.error("Seeding run aborted: %s", exc)
        if self._handler is not None:
            root = get_logger()
            root.removeHandler(self._handler)
            self._handler.close()
            root.setLevel(self._previous_level)
            self._handler = None

    def start(self, generator: str, *, max_size: int, count: int, seed: int, dummy: bool = False) -> None:
        self._logger.info(
            "Seeding with %s (max_size=%d, count=%d, seed=%d%s)",
            generator, max_size, count, seed, ", dummy" if dummy else "",
        )

    def finish(self, report: SeedingReport) -> None:
        self._logger.info(
            "Generated %d input(s) with %s: lengths %d..%d, %d byte(s) total",
            report.count, report.generator, report.min_len, report.max_len, report.total_bytes,
        )
        for idx, name in enumerate(report.names):
            self._logger.debug("input %d: %s", idx, name)
