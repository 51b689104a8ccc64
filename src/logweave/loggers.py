"""
Logger abstractions.

``Logger`` is a pure transport: it ignores the severity and forwards the
message text to its sink. Level awareness lives entirely in the decorators
(see ``logweave.decorators``), which wrap one logger each and form a
singly-linked chain built bottom-up.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .ownership import adopt
from .severity import Severity
from .sinks import OutputSink


class BaseLogger(ABC):
    """Abstract base class for loggers and logger decorators."""

    _owner: Optional[object] = None

    @abstractmethod
    def log(self, severity: Severity, message: str) -> None:
        """Log ``message`` at ``severity``."""
        ...

    def close(self) -> None:
        """Release the sinks owned by this chain."""

    def fatal(self, message: str) -> None:
        self.log(Severity.FATAL, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def warning(self, message: str) -> None:
        self.log(Severity.WARNING, message)

    def info(self, message: str) -> None:
        self.log(Severity.INFO, message)

    def debug(self, message: str) -> None:
        self.log(Severity.DEBUG, message)

    def noise(self, message: str) -> None:
        self.log(Severity.NOISE, message)

    def __enter__(self) -> BaseLogger:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class Logger(BaseLogger):
    """Forwards every message, unchanged, to one owned sink."""

    def __init__(self, sink: OutputSink):
        if not isinstance(sink, OutputSink):
            raise TypeError(f"Logger requires an OutputSink, got {type(sink).__name__}")
        self._sink = adopt(self, sink)

    @property
    def sink(self) -> OutputSink:
        return self._sink

    def log(self, severity: Severity, message: str) -> None:
        self._sink.output(message)

    def close(self) -> None:
        self._sink.close()


class LoggerDecorator(BaseLogger):
    """Base class for loggers that wrap, and exclusively own, another logger."""

    def __init__(self, inner: BaseLogger):
        if not isinstance(inner, BaseLogger):
            raise TypeError(f"{type(self).__name__} requires a logger to wrap, got {type(inner).__name__}")
        self._inner = adopt(self, inner)

    @property
    def inner(self) -> BaseLogger:
        return self._inner

    def log(self, severity: Severity, message: str) -> None:
        self._inner.log(severity, message)

    def close(self) -> None:
        self._inner.close()
