"""Fetch tracing: start/finish/error events for upstream calls and page loaders.

The client takes an optional observer instead of writing to the console itself,
so fetching can be exercised without any trace output.
"""
import logging
import time
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, Protocol

logger = logging.getLogger("pokeloaders.trace")

# ANSI colour codes for console output
COLORS = {
    "start": "\x1b[36m",   # cyan
    "finish": "\x1b[32m",  # green
    "error": "\x1b[31m",   # red
    "dim": "\x1b[2m",
    "reset": "\x1b[0m",
}


class FetchObserver(Protocol):
    def on_start(self, operation: str, args: tuple) -> None: ...

    def on_finish(self, operation: str, duration_ms: int) -> None: ...

    def on_error(self, operation: str, duration_ms: int, error: BaseException) -> None: ...


class LoggingObserver:
    """Writes one human-readable line per event to the ``pokeloaders.trace`` logger."""

    def __init__(self, colors: bool = True, log: logging.Logger | None = None):
        self.colors = colors
        self.log = log or logger

    def _paint(self, color: str, text: str) -> str:
        if not self.colors:
            return text
        return f"{COLORS[color]}{text}{COLORS['reset']}"

    def _stamp(self) -> str:
        return self._paint("dim", f"[{datetime.now().strftime('%H:%M:%S')}]")

    def on_start(self, operation: str, args: tuple) -> None:
        arg_str = f" ({', '.join(str(a) for a in args)})" if args else ""
        self.log.info(f"{self._stamp()} {self._paint('start', 'Starting:')} {operation}{arg_str}")

    def on_finish(self, operation: str, duration_ms: int) -> None:
        self.log.info(
            f"{self._stamp()} {self._paint('finish', 'Finished:')} {operation} "
            f"{self._paint('dim', f'({duration_ms}ms)')}"
        )

    def on_error(self, operation: str, duration_ms: int, error: BaseException) -> None:
        self.log.error(
            f"{self._stamp()} {self._paint('error', 'Error:')} {operation} "
            f"{self._paint('dim', f'({duration_ms}ms)')} {error!r}"
        )


@contextmanager
def trace(observer: FetchObserver | None, operation: str, *args) -> Iterator[None]:
    """Reports the enclosed block to ``observer``; does nothing when it is None."""
    if observer is None:
        yield
        return

    observer.on_start(operation, args)
    start = time.perf_counter()
    try:
        yield
    except BaseException as e:
        observer.on_error(operation, round((time.perf_counter() - start) * 1000), e)
        raise
    observer.on_finish(operation, round((time.perf_counter() - start) * 1000))
