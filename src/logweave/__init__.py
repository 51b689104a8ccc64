"""
logweave: a composable logging facade.

Callers pick where messages go (sinks) independently of how they are
transformed on the way (logger decorators):

- sinks: console, file, network (stub), multi (fan-out)
- decorators: level tagging, level filtering, timestamping
- presets: ``LoggerBuilder``

Design Pattern: Strategy Pattern for sinks, Decorator Pattern for loggers.
"""

from .builder import LoggerBuilder
from .decorators import LevelFilter, LevelTagger, Timestamper
from .errors import LoggingError, OwnershipError, SinkOpenError
from .loggers import BaseLogger, Logger, LoggerDecorator
from .severity import Severity
from .sinks import ConsoleSink, FileSink, MultiSink, NetworkService, NetworkSink, OutputSink

__version__ = "0.1.0"

__all__ = [
    "BaseLogger",
    "ConsoleSink",
    "FileSink",
    "LevelFilter",
    "LevelTagger",
    "Logger",
    "LoggerBuilder",
    "LoggerDecorator",
    "LoggingError",
    "MultiSink",
    "NetworkService",
    "NetworkSink",
    "OutputSink",
    "OwnershipError",
    "Severity",
    "SinkOpenError",
    "Timestamper",
]
