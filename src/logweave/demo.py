"""
Demonstration of a few logger configurations.

Run with ``python -m logweave``.
"""

from __future__ import annotations

from .builder import LoggerBuilder
from .config import settings
from .decorators import LevelFilter
from .loggers import Logger
from .severity import Severity
from .sinks import ConsoleSink, FileSink, MultiSink, NetworkSink


def main() -> int:
    with LevelFilter(LoggerBuilder.console_with_level_tag(), Severity.WARNING) as filtered:
        filtered.log(Severity.INFO, "This message will be filtered out")
        filtered.set_min_severity(Severity.INFO)
        filtered.log(Severity.INFO, "This message will now be logged")

    facade = settings.facade
    outputs = MultiSink(
        [
            ConsoleSink(),
            FileSink(facade.file_path),
            NetworkSink(facade.network_url),
        ]
    )
    with Logger(outputs) as multi_logger:
        multi_logger.log(Severity.INFO, "This message will be logged to the console and a file")

    return 0
