import io
import typing as t

import pytest

from logweave.diagnostics import reset_diagnostics
from logweave.sinks import OutputSink


class RecordingSink(OutputSink):
    """Keeps every line it receives; optionally appends its name to a shared journal."""

    def __init__(self, name: str = "recorder", journal: t.Optional[list] = None):
        self.name = name
        self.lines: list[str] = []
        self.journal = journal
        self.closed = False

    def output(self, text: str) -> None:
        self.lines.append(text)
        if self.journal is not None:
            self.journal.append((self.name, text))

    def close(self) -> None:
        self.closed = True


class ExplodingSink(OutputSink):
    """Fails on every call."""

    def output(self, text: str) -> None:
        raise RuntimeError("boom")

    def close(self) -> None:
        raise RuntimeError("close boom")


@pytest.fixture(autouse=True)
def clean_diagnostics():
    """Every test starts with unconfigured diagnostics."""
    reset_diagnostics()
    yield
    reset_diagnostics()


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def make_recorder() -> t.Callable[..., RecordingSink]:
    return RecordingSink


@pytest.fixture
def recorder() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def exploding_sink() -> ExplodingSink:
    return ExplodingSink()
