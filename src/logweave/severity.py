"""
Severity levels for the logging facade.

Ordinal order runs from most to least severe. A lower value means a more
severe message, so "at least as severe as" is ``<=`` on the ordinal.
"""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    NOISE = 5

    @classmethod
    def parse(cls, value: Severity | int | str) -> Severity:
        """Coerce a severity, ordinal or case-insensitive name into a ``Severity``."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Severity ordinal out of range: {value}") from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls.parse(int(name))
            try:
                return cls[name]
            except KeyError:
                raise ValueError(
                    f"Unknown severity: {value!r}. Supported: {[s.name.lower() for s in cls]}"
                ) from None
        raise ValueError(f"Invalid severity: {value!r}")

    def is_at_least(self, threshold: Severity) -> bool:
        """True when this severity is as severe as ``threshold`` or more."""
        return int(self) <= int(threshold)
