"""
LoggerBuilder: configuration presets for common logger stacks.

The presets only compose sinks and decorators; they hold no logic of their
own. Stacks are assembled bottom-up: sink, then ``Logger``, then each
decorator from innermost to outermost.
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Optional

from .config import FacadeSettings, settings as default_settings
from .decorators import DEFAULT_MIN_SEVERITY, LevelFilter, LevelTagger, Timestamper
from .diagnostics import get_logger
from .loggers import BaseLogger, Logger
from .severity import Severity
from .sinks import ConsoleSink, FileSink, MultiSink, NetworkSink, OutputSink

logger = get_logger("logweave.builder")


class LoggerBuilder:
    """Named constructors for known-useful decorator stacks."""

    @staticmethod
    def console(stream: Optional[IO[str]] = None) -> Logger:
        """Plain console logger: messages are written unchanged."""
        return Logger(ConsoleSink(stream))

    @staticmethod
    def console_with_level_tag(stream: Optional[IO[str]] = None) -> LevelTagger:
        """Console logger that prefixes the severity ordinal."""
        return LevelTagger(Logger(ConsoleSink(stream)))

    @staticmethod
    def file_with_level_filter(
        path: str | Path,
        min_severity: Severity | int | str = DEFAULT_MIN_SEVERITY,
    ) -> LevelFilter:
        """File logger that drops messages less severe than ``min_severity``.

        Raises:
            SinkOpenError: the file cannot be opened.
        """
        return LevelFilter(Logger(FileSink(path)), min_severity)

    @staticmethod
    def file_with_timestamp(path: str | Path) -> Timestamper:
        """File logger that prefixes the local time.

        Raises:
            SinkOpenError: the file cannot be opened.
        """
        return Timestamper(Logger(FileSink(path)))

    @staticmethod
    def multi(*sinks: OutputSink) -> Logger:
        """Plain logger fanning out to ``sinks`` in the given order."""
        return Logger(MultiSink(sinks))

    @staticmethod
    def from_settings(facade: FacadeSettings | None = None) -> BaseLogger:
        """
        Build the stack described by ``FacadeSettings`` (``LW_*`` environment variables).

        Layout, outermost first: ``LevelFilter`` -> ``LevelTagger`` (if enabled)
        -> ``Timestamper`` (if enabled) -> ``Logger`` over one sink, or over a
        ``MultiSink`` when several sinks are named. The innermost prefix lands
        leftmost, so lines read ``[<time>] [<ordinal>] message``.
        """
        cfg = facade or default_settings.facade

        sinks: list[OutputSink] = []
        try:
            for name in cfg.sink_names:
                if name == "console":
                    sinks.append(ConsoleSink())
                elif name == "file":
                    sinks.append(FileSink(cfg.file_path))
                elif name == "network":
                    sinks.append(NetworkSink(cfg.network_url))
        except Exception:
            for sink in sinks:
                sink.close()
            raise

        stack: BaseLogger = Logger(sinks[0] if len(sinks) == 1 else MultiSink(sinks))
        if cfg.timestamp:
            stack = Timestamper(stack, fmt=cfg.timestamp_format)
        if cfg.level_tag:
            stack = LevelTagger(stack)
        stack = LevelFilter(stack, cfg.min_severity)

        logger.debug(
            "logger_built_from_settings",
            sinks=cfg.sinks,
            min_severity=cfg.min_severity.name,
            level_tag=cfg.level_tag,
            timestamp=cfg.timestamp,
        )
        return stack
