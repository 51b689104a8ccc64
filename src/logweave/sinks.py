"""
Output sink abstractions and concrete implementations.

A sink receives a fully formatted line of text and delivers it somewhere.
Sinks never see severities; everything level-aware lives in the logger
decorators.

Design Pattern: Strategy Pattern for the output destination,
Composite Pattern for fan-out (``MultiSink``).

Thread safety: ``FileSink`` serializes access to its handle with a lock.
``ConsoleSink`` relies on the stream's own write atomicity, and
``NetworkSink`` holds no mutable state.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Iterable, Optional

from .diagnostics import get_logger
from .errors import SinkOpenError
from .ownership import adopt_all

logger = get_logger("logweave.sinks")

LINE_TERMINATOR = "\n"


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class OutputSink(ABC):
    """Abstract base class for output sinks."""

    _owner: Optional[object] = None

    @abstractmethod
    def output(self, text: str) -> None:
        """Deliver one formatted line. The sink appends the line terminator."""
        ...

    def flush(self) -> None:
        """Push buffered output to its destination."""

    def close(self) -> None:
        """Release resources held by the sink."""

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ConsoleSink(OutputSink):
    """Writes each line to a text stream.

    Args:
        stream: Stream to write to. When omitted, ``sys.stdout`` (or
            ``sys.stderr`` with ``use_stderr``) is looked up on every call, so
            stream replacement at runtime is honoured.
        use_stderr: Default to standard error instead of standard output.
    """

    def __init__(self, stream: Optional[IO[str]] = None, *, use_stderr: bool = False):
        self._stream = stream
        self._use_stderr = use_stderr

    @property
    def stream(self) -> IO[str]:
        if self._stream is not None:
            return self._stream
        return sys.stderr if self._use_stderr else sys.stdout

    def isatty(self) -> bool:
        return bool(getattr(self.stream, "isatty", lambda: False)())

    def output(self, text: str) -> None:
        try:
            self.stream.write(text + LINE_TERMINATOR)
        except (OSError, ValueError) as exc:
            logger.warning("console_sink_write_failed", error=str(exc))

    def flush(self) -> None:
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            logger.warning("console_sink_flush_failed", error=str(exc))


class FileSink(OutputSink):
    """Appends each line to a UTF-8 file opened at construction.

    Lines are not flushed individually; they reach the file on ``flush()``,
    ``close()`` or when the handle is finalized.

    Raises:
        SinkOpenError: the file cannot be opened for appending.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._lock = threading.Lock()
        try:
            self._file: Optional[IO[str]] = open(self._path, "a", encoding="utf-8")
        except OSError as exc:
            logger.debug("file_sink_open_failed", path=str(self._path), error=str(exc))
            raise SinkOpenError(path=str(self._path), reason=exc.strerror or str(exc)) from exc
        logger.debug("file_sink_opened", path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file is None

    def output(self, text: str) -> None:
        with self._lock:
            if self._file is None:
                logger.warning("file_sink_write_after_close", path=str(self._path))
                return
            self._file.write(text + LINE_TERMINATOR)

    def flush(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is None:
                return
            self._file.close()
            self._file = None
        logger.debug("file_sink_closed", path=str(self._path))


class NetworkService:
    """Placeholder transport for a remote log collector.

    ``send`` performs no I/O. It marks the boundary where a real transport
    would connect to ``url``.
    """

    def __init__(self, url: str):
        self.url = url

    def send(self, message: str) -> None:
        pass


class NetworkSink(OutputSink):
    """Hands each line to a ``NetworkService``. The address is stored, never parsed."""

    def __init__(self, url: str):
        self._service = NetworkService(url)

    @property
    def url(self) -> str:
        return self._service.url

    def output(self, text: str) -> None:
        self._service.send(text)


# =============================================================================
# Composite
# =============================================================================


class MultiSink(OutputSink):
    """Fans each line out to its child sinks in registration order.

    A child that raises does not stop delivery to the remaining children; the
    failure is reported through the diagnostics logger.
    """

    def __init__(self, sinks: Iterable[OutputSink] = ()):
        children = list(sinks)
        for child in children:
            if not isinstance(child, OutputSink):
                raise TypeError(f"MultiSink children must be OutputSink instances, got {type(child).__name__}")
        self._sinks: list[OutputSink] = adopt_all(self, children)

    @property
    def sinks(self) -> tuple[OutputSink, ...]:
        return tuple(self._sinks)

    def __len__(self) -> int:
        return len(self._sinks)

    def output(self, text: str) -> None:
        for sink in self._sinks:
            try:
                sink.output(text)
            except Exception as exc:
                logger.warning("multi_sink_child_failed", sink=type(sink).__name__, error=str(exc))

    def flush(self) -> None:
        for sink in self._sinks:
            try:
                sink.flush()
            except Exception as exc:
                logger.warning("multi_sink_child_flush_failed", sink=type(sink).__name__, error=str(exc))

    def close(self) -> None:
        for sink in self._sinks:
            try:
                sink.close()
            except Exception as exc:
                logger.warning("multi_sink_child_close_failed", sink=type(sink).__name__, error=str(exc))
