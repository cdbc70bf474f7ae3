"""Tests for CLI progress output and public method documentation."""

import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from somalid.cli.output import ProgressIndicator
from somalid.core.record import RawRecord, ValidatedRecord
from somalid.validation.cache import DateParseCache
from somalid.validation.dates import DateEngine, ParsedDate
from somalid.validation.result import BatchResult, BatchSummary, RecordOutcome


class _TTYStream(io.StringIO):
    """In-memory stream that reports itself as a terminal."""

    def isatty(self) -> bool:
        return True


class TestProgressIndicator:
    def test_marks_on_tty(self, capsys: pytest.CaptureFixture[str]) -> None:
        stream = _TTYStream()
        progress = ProgressIndicator(stream=stream)
        progress.start("Validating records.csv")
        progress.success("Validated 3 records")

        assert stream.getvalue() == "Validating records.csv... ✓\n"
        assert capsys.readouterr().out == "Validated 3 records\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        stream = _TTYStream()
        progress = ProgressIndicator(stream=stream)
        progress.start("Reading input")
        progress.error("file not found")

        assert stream.getvalue() == "Reading input... ✗\n"
        assert capsys.readouterr().err == "Error: file not found\n"

    def test_redirected_stream_disables_marks(self) -> None:
        stream = io.StringIO()
        progress = ProgressIndicator(stream=stream)
        assert not progress.enabled
        progress.start("Validating")
        assert stream.getvalue() == ""

    @given(st.booleans())
    def test_disabled_flag_wins(self, enabled: bool) -> None:
        progress = ProgressIndicator(enabled=enabled, stream=_TTYStream())
        assert progress.enabled is enabled


@pytest.mark.parametrize(
    "method",
    [
        ParsedDate.to_datetime,
        ParsedDate.to_iso,
        DateEngine.is_valid,
        ProgressIndicator.__init__,
        ProgressIndicator.start,
        ProgressIndicator.success,
        ProgressIndicator.error,
        RecordOutcome.code.fget,
        BatchResult.failures,
        BatchResult.successes,
        BatchSummary.from_counts,
        BatchSummary.to_dict,
        DateParseCache.clear,
        RawRecord.to_dict,
        ValidatedRecord.to_dict,
    ],
    ids=lambda method: method.__qualname__,
)
def test_public_methods_documented(method: object) -> None:
    assert method.__doc__ and method.__doc__.strip()
