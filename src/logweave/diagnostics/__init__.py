"""
Diagnostics logging for logweave itself.

Reports what the library does (sinks opened and closed, child sink
failures, threshold changes) without going through the loggers it builds.

Library: structlog + orjson for JSON rendering.
"""

from .core import configure_diagnostics, get_logger, reset_diagnostics

__all__ = ["configure_diagnostics", "get_logger", "reset_diagnostics"]
