"""
Exception hierarchy for logweave.

Only sink construction can fail at runtime (``SinkOpenError``). ``OwnershipError``
signals a wiring mistake: handing one sink or logger to two owners.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LoggingError(Exception):
    """Root of all logweave exceptions."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class SinkOpenError(LoggingError, OSError):
    """A file sink could not open its destination.

    Subclasses ``OSError`` so callers may catch it as ``IOError``.
    """

    def __init__(self, *, path: str, reason: str) -> None:
        message = f"Unable to open log file '{path}': {reason}"
        super().__init__(message, code="SINK_OPEN_FAILED", details={"path": path, "reason": reason})
        self.path = path


class OwnershipError(LoggingError, ValueError):
    """A sink or logger was handed to a second owner."""

    def __init__(self, *, node: object, owner: object) -> None:
        node_type = type(node).__name__
        message = f"{node_type} is already owned by {type(owner).__name__}; sinks and loggers cannot be shared"
        super().__init__(message, code="ALREADY_OWNED", details={"node": node_type, "owner": type(owner).__name__})
