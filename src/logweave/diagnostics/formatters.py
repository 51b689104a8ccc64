"""
Diagnostics formatters and color utilities.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import orjson
from structlog.typing import EventDict

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
    "key": "\033[34m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default or str, option=orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC).decode()


class ConsoleFormatter:
    """Renders an event dict as aligned columns: time | LEVEL | logger | message key=value."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    LEVEL_WIDTH = 8
    LOGGER_WIDTH = 24
    SEPARATOR = " | "

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if len(text) > width:
            text = "..." + text[-(width - 3) :] if width > 3 else text[-width:]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw_timestamp: str | None) -> str:
        if raw_timestamp:
            try:
                dt = datetime.fromisoformat(raw_timestamp.replace("Z", "+00:00"))
                if dt.tzinfo is None:
                    dt = dt.replace(tzinfo=timezone.utc)
                return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)
            except (ValueError, TypeError):
                pass
        return datetime.now().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def format(cls, event_dict: EventDict, *, use_color: bool = False) -> str:
        """Format an event dict into an aligned string."""
        level = str(event_dict.get("level", "info")).upper()
        message = str(event_dict.get("message", event_dict.get("event", "")))
        logger_name = str(event_dict.get("logger", "logweave"))

        extras = []
        for k, v in event_dict.items():
            if k in cls.EXCLUDED_KEYS:
                continue
            if use_color:
                extras.append(f"{colorize(k, 'key')}={colorize(str(v), 'dim')}")
            else:
                extras.append(f"{k}={v}")
        if extras:
            message = f"{message} " + " ".join(extras)

        timestamp = cls._format_timestamp(event_dict.get("timestamp"))
        level_text = cls._fit_right(level, cls.LEVEL_WIDTH)
        logger_text = cls._fit_right(logger_name, cls.LOGGER_WIDTH)
        if use_color:
            timestamp = colorize(timestamp, "timestamp")
            color = cls._LEVEL_COLORS.get(level)
            if color:
                level_text = f"{color}{level_text}{cls._RESET}"
            logger_text = colorize(logger_text, "logger")

        return cls.SEPARATOR.join([timestamp, level_text, logger_text, message])
