"""Priority-filtered message output and simple timing helpers."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Any, Callable, TextIO, TypeVar

T = TypeVar("T")


class Priority(IntEnum):
    DEBUG = 0
    PROGRESS = 1


class Logger:
    """Writes messages whose priority reaches ``min_priority`` to ``out``."""

    def __init__(self, min_priority: int = 2, out: TextIO | None = None) -> None:
        self.min_priority = min_priority
        self.out = out

    def _emit(self, priority: int, args: tuple[Any, ...], end: str) -> None:
        if self.out is not None and priority >= self.min_priority:
            self.out.write("".join(str(arg) for arg in args) + end)

    def msg(self, priority: int, *args: Any) -> None:
        """Write the concatenated arguments followed by a newline."""
        self._emit(priority, args, "\n")

    def msg_n(self, priority: int, *args: Any) -> None:
        """Write the concatenated arguments without a newline."""
        self._emit(priority, args, "")

    def debug(self, *args: Any) -> None:
        self.msg(Priority.DEBUG, *args)

    def debug_n(self, *args: Any) -> None:
        self.msg_n(Priority.DEBUG, *args)

    def progress(self, *args: Any) -> None:
        self.msg(Priority.PROGRESS, *args)

    def progress_n(self, *args: Any) -> None:
        self.msg_n(Priority.PROGRESS, *args)


_default_logger = Logger()


def get_logger() -> Logger:
    """Return the shared logger."""
    return _default_logger


class Timer:
    """Context manager that logs the elapsed time at debug priority."""

    def __init__(self, name: str, logger: Logger | None = None) -> None:
        self.name = name
        self.logger = logger
        self.elapsed = 0.0
        self._start = 0.0

    def __enter__(self) -> Timer:
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        logger = self.logger if self.logger is not None else get_logger()
        logger.debug(self.name, ": ", self.elapsed, " seconds")


def measure_time(name: str, func: Callable[[], T]) -> T:
    """Call ``func`` inside a :class:`Timer` and return its result."""
    with Timer(name):
        return func()