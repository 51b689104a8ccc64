"""
Diagnostics logging tests.
"""

from __future__ import annotations

import orjson
import pytest

from logweave.decorators import LevelFilter
from logweave.diagnostics import configure_diagnostics, get_logger
from logweave.diagnostics.formatters import ConsoleFormatter
from logweave.loggers import Logger
from logweave.severity import Severity
from logweave.sinks import FileSink


def read_events(path) -> list[dict]:
    return [orjson.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line]


class TestDefaults:
    def test_warnings_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("logweave.test").warning("something_odd", detail=42)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "something_odd" in captured.err
        assert "detail=42" in captured.err
        assert "WARNING" in captured.err

    def test_debug_is_dropped_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        get_logger("logweave.test").debug("quiet")
        assert capsys.readouterr().err == ""


class TestConfigure:
    def test_json_file_sink(self, tmp_path) -> None:
        diag = tmp_path / "diag" / "logweave.log"
        configure_diagnostics(level="debug", sinks="file", fmt="json", file_path=str(diag))
        sink = FileSink(tmp_path / "app.log")
        sink.close()

        events = read_events(diag)
        messages = [e["message"] for e in events]
        assert "file_sink_opened" in messages
        assert "file_sink_closed" in messages
        opened = events[messages.index("file_sink_opened")]
        assert opened["level"] == "debug"
        assert opened["logger"] == "logweave.sinks"
        assert opened["path"] == str(tmp_path / "app.log")
        assert "timestamp" in opened

    def test_threshold_change_is_reported(self, tmp_path, recorder) -> None:
        diag = tmp_path / "diag.log"
        configure_diagnostics(level="debug", sinks="file", fmt="json", file_path=str(diag))
        logger = LevelFilter(Logger(recorder), Severity.WARNING)
        logger.set_min_severity(Severity.INFO)
        events = [e for e in read_events(diag) if e["message"] == "level_filter_threshold_changed"]
        assert events == [
            {
                "level": "debug",
                "logger": "logweave.decorators",
                "message": "level_filter_threshold_changed",
                "previous": "WARNING",
                "current": "INFO",
                "timestamp": events[0]["timestamp"],
            }
        ]

    def test_level_filters_events(self, tmp_path) -> None:
        diag = tmp_path / "diag.log"
        configure_diagnostics(level="error", sinks="file", fmt="json", file_path=str(diag))
        log = get_logger("logweave.test")
        log.warning("below_threshold")
        log.error("at_threshold")
        assert [e["message"] for e in read_events(diag)] == ["at_threshold"]

    def test_console_format_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_diagnostics(level="info", sinks="stderr", fmt="console")
        get_logger("logweave.test").info("hello_diagnostics", n=1)
        err = capsys.readouterr().err
        assert " | " in err
        assert "INFO" in err
        assert "hello_diagnostics n=1" in err

    def test_unknown_sink_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported diagnostics sink"):
            configure_diagnostics(sinks="carrier-pigeon")

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported diagnostics level"):
            configure_diagnostics(level="loud")

    def test_rejected_sink_list_closes_opened_files(self, tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
        opened: list[FileSink] = []
        original_init = FileSink.__init__

        def tracking_init(self, path) -> None:
            original_init(self, path)
            opened.append(self)

        monkeypatch.setattr(FileSink, "__init__", tracking_init)
        with pytest.raises(ValueError, match="Unsupported diagnostics sink: bogus"):
            configure_diagnostics(sinks="file,bogus", file_path=str(tmp_path / "diag.log"))
        assert len(opened) == 1
        assert opened[0].closed

    def test_reconfigure_closes_previous_file_sink(self, tmp_path) -> None:
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        configure_diagnostics(level="info", sinks="file", fmt="json", file_path=str(first))
        get_logger("logweave.test").info("to_first")
        configure_diagnostics(level="info", sinks="file", fmt="json", file_path=str(second))
        get_logger("logweave.test").info("to_second")
        assert [e["message"] for e in read_events(first)] == ["to_first"]
        assert [e["message"] for e in read_events(second)] == ["to_second"]


class TestConsoleFormatter:
    def test_columns(self) -> None:
        line = ConsoleFormatter.format(
            {
                "level": "warning",
                "message": "event_name",
                "logger": "logweave.sinks",
                "timestamp": "2024-01-01T00:00:00+00:00",
                "key": "value",
            }
        )
        timestamp, level, logger, message = line.split(" | ")
        assert len(timestamp) == 19
        assert level.strip() == "WARNING"
        assert logger.strip() == "logweave.sinks"
        assert message == "event_name key=value"

    def test_long_logger_name_is_truncated_from_the_left(self) -> None:
        name = "logweave." + "x" * 40
        line = ConsoleFormatter.format({"level": "info", "message": "m", "logger": name})
        logger_column = line.split(" | ")[2]
        assert len(logger_column) == ConsoleFormatter.LOGGER_WIDTH
        assert logger_column.startswith("...")
