"""
Severity ordering and parsing tests.
"""

from __future__ import annotations

import pytest

from logweave.severity import Severity


class TestSeverityOrdering:
    def test_ordinals_run_from_most_to_least_severe(self) -> None:
        assert [int(s) for s in Severity] == [0, 1, 2, 3, 4, 5]
        assert [s.name for s in Severity] == ["FATAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOISE"]

    def test_more_severe_has_lower_ordinal(self) -> None:
        assert Severity.FATAL < Severity.ERROR < Severity.WARNING < Severity.INFO < Severity.DEBUG < Severity.NOISE

    @pytest.mark.parametrize("severity", list(Severity))
    def test_is_at_least_itself(self, severity: Severity) -> None:
        assert severity.is_at_least(severity)

    def test_is_at_least_direction(self) -> None:
        """WARNING threshold admits FATAL/ERROR/WARNING only."""
        passing = [s for s in Severity if s.is_at_least(Severity.WARNING)]
        assert passing == [Severity.FATAL, Severity.ERROR, Severity.WARNING]


class TestSeverityParse:
    def test_parse_passes_severity_through(self) -> None:
        assert Severity.parse(Severity.DEBUG) is Severity.DEBUG

    def test_parse_ordinal(self) -> None:
        assert Severity.parse(2) is Severity.WARNING

    @pytest.mark.parametrize("raw", ["warning", "WARNING", " Warning ", "2"])
    def test_parse_name_case_insensitive(self, raw: str) -> None:
        assert Severity.parse(raw) is Severity.WARNING

    def test_parse_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown severity"):
            Severity.parse("verbose")

    def test_parse_out_of_range_ordinal_raises(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Severity.parse(6)

    def test_parse_rejects_bool(self) -> None:
        with pytest.raises(ValueError):
            Severity.parse(True)
