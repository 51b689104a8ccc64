"""
Core diagnostics configuration and initialization logic.

Diagnostics are rendered by a private structlog processor chain and written
to logweave's own ``OutputSink`` instances, so the library does not touch the
global structlog configuration of the host application.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import ConsoleFormatter, orjson_dumps

if TYPE_CHECKING:
    from logweave.sinks import OutputSink

# =============================================================================
# Global State
# =============================================================================

_LEVEL_VALUES = {
    "debug": 10,
    "info": 20,
    "warning": 30,
    "error": 40,
    "critical": 50,
}

DEFAULT_LEVEL = "WARNING"
DEFAULT_FORMAT = "console"


class _DiagnosticsState:
    def __init__(self) -> None:
        self.level: int = _LEVEL_VALUES[DEFAULT_LEVEL.lower()]
        self.fmt: str = DEFAULT_FORMAT
        # None means "not configured yet": fall back to standard error.
        self.sinks: Optional[list[OutputSink]] = None


_state = _DiagnosticsState()
_guard = threading.local()


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


_SILENT_LOGGER = structlog.PrintLogger(file=_NopFile())


# =============================================================================
# Structlog Processors
# =============================================================================


def filter_by_level(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Drop events below the configured diagnostics level."""
    level = _LEVEL_VALUES.get(str(event_dict.get("level", "info")).lower(), 20)
    if level < _state.level:
        raise structlog.DropEvent
    return event_dict


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "logweave")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message'."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


def render_to_sinks(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
    """Render the event to every diagnostics sink. Returns empty to suppress default output."""
    if getattr(_guard, "active", False):
        return ""
    _guard.active = True
    try:
        for sink in _active_sinks():
            try:
                sink.output(_render(event_dict, sink))
                sink.flush()
            except Exception:
                pass  # A broken diagnostics sink must not break the caller
    finally:
        _guard.active = False
    return ""


_PROCESSORS = [
    structlog.stdlib.add_log_level,
    filter_by_level,
    add_timestamp,
    add_logger_name,
    rename_event_key,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    render_to_sinks,
]


def _render(event_dict: EventDict, sink: OutputSink) -> str:
    if _state.fmt == "json":
        return orjson_dumps(event_dict)
    use_color = bool(getattr(sink, "isatty", lambda: False)())
    return ConsoleFormatter.format(event_dict, use_color=use_color)


def _active_sinks() -> list[OutputSink]:
    if _state.sinks is None:
        from logweave.sinks import ConsoleSink

        _state.sinks = [ConsoleSink(use_stderr=True)]
    return _state.sinks


def get_logger(name: str | None = None) -> Any:
    """Get a diagnostics logger bound to ``name``."""
    return structlog.wrap_logger(
        _SILENT_LOGGER,
        processors=_PROCESSORS,
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
        _name=name or "logweave",
    )


# =============================================================================
# Configuration Logic
# =============================================================================


def _create_sinks(sinks: str, file_path: str) -> list[OutputSink]:
    from logweave.sinks import ConsoleSink, FileSink

    created: list[OutputSink] = []
    try:
        for name in (s.strip().lower() for s in sinks.split(",")):
            if name == "stderr":
                created.append(ConsoleSink(use_stderr=True))
            elif name == "file":
                Path(file_path).parent.mkdir(parents=True, exist_ok=True)
                created.append(FileSink(file_path))
            elif name:
                raise ValueError(f"Unsupported diagnostics sink: {name}. Supported: ['stderr', 'file']")
    except Exception:
        _close_sinks(created)
        raise
    return created


def _close_sinks(sinks: Optional[list[OutputSink]]) -> None:
    for sink in sinks or []:
        try:
            sink.close()
        except Exception:
            pass


def configure_diagnostics(
    *,
    level: str | None = None,
    sinks: str | None = None,
    fmt: str | None = None,
    file_path: str | None = None,
) -> None:
    """
    Configure logweave's diagnostics logging.

    Arguments left as ``None`` are read from ``settings.diagnostics``.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        sinks: Comma-separated sink names (stderr, file)
        fmt: Output format (console, json)
        file_path: Path for the file sink
    """
    from logweave.config import settings

    diagnostics = settings.diagnostics
    level_name = str(level or diagnostics.level.value).lower()
    if level_name not in _LEVEL_VALUES:
        raise ValueError(f"Unsupported diagnostics level: {level_name}. Supported: {list(_LEVEL_VALUES)}")

    new_sinks = _create_sinks(sinks or diagnostics.sinks, file_path or diagnostics.file_path)

    previous = _state.sinks
    _state.sinks = new_sinks
    _state.level = _LEVEL_VALUES[level_name]
    _state.fmt = "json" if str(fmt or diagnostics.format.value).lower() == "json" else "console"
    _close_sinks(previous)


def reset_diagnostics() -> None:
    """Restore the unconfigured defaults (used by tests)."""
    previous = _state.sinks
    _state.sinks = None
    _state.level = _LEVEL_VALUES[DEFAULT_LEVEL.lower()]
    _state.fmt = DEFAULT_FORMAT
    _close_sinks(previous)
