"""
Behavior-adding logger decorators.

Each decorator receives ``(severity, message)``, may rewrite the message or
drop it, and delegates to the logger it wraps. Prefixes take the form
``"[" + content + "] "``. Every decorator prepends its prefix before
delegating, so in a stack the innermost prefix ends up leftmost:
``Timestamper(LevelTagger(logger))`` emits ``"[2] [<time>] message"``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from .diagnostics import get_logger
from .loggers import BaseLogger, LoggerDecorator
from .severity import Severity

logger = get_logger("logweave.decorators")

DEFAULT_MIN_SEVERITY = Severity.INFO
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Clock = Callable[[], datetime]


class LevelTagger(LoggerDecorator):
    """Prefixes the numeric severity ordinal: ``"[3] message"``."""

    def log(self, severity: Severity, message: str) -> None:
        self._inner.log(severity, f"[{int(severity)}] {message}")


class LevelFilter(LoggerDecorator):
    """Drops messages less severe than a configurable threshold.

    A message passes when ``int(severity) <= int(min_severity)``. With a
    ``WARNING`` threshold, FATAL, ERROR and WARNING pass while INFO, DEBUG and
    NOISE are dropped silently.

    The threshold is the only mutable state in a chain. Updating it rebinds a
    single attribute, so any ``log`` call that starts after
    ``set_min_severity`` returns sees the new value.
    """

    def __init__(self, inner: BaseLogger, min_severity: Severity | int | str = DEFAULT_MIN_SEVERITY):
        threshold = Severity.parse(min_severity)
        super().__init__(inner)
        self._min_severity = threshold

    @property
    def min_severity(self) -> Severity:
        return self._min_severity

    def set_min_severity(self, severity: Severity | int | str) -> None:
        new_severity = Severity.parse(severity)
        if new_severity is not self._min_severity:
            logger.debug(
                "level_filter_threshold_changed",
                previous=self._min_severity.name,
                current=new_severity.name,
            )
        self._min_severity = new_severity

    set_min_level = set_min_severity

    def log(self, severity: Severity, message: str) -> None:
        if Severity(severity).is_at_least(self._min_severity):
            self._inner.log(severity, message)


class Timestamper(LoggerDecorator):
    """Prefixes the local wall-clock time at the moment ``log`` is called.

    Args:
        inner: Logger to wrap.
        clock: Returns the current local time. Defaults to ``datetime.now``.
        fmt: ``strftime`` format of the timestamp.
    """

    def __init__(self, inner: BaseLogger, clock: Clock = datetime.now, fmt: str = TIMESTAMP_FORMAT):
        super().__init__(inner)
        self._clock = clock
        self._fmt = fmt

    def log(self, severity: Severity, message: str) -> None:
        timestamp = self._clock().strftime(self._fmt)
        self._inner.log(severity, f"[{timestamp}] {message}")
