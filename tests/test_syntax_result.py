"""Tests for the Ok/Err/IOFailure result values."""

from __future__ import annotations

import errno

import pytest

from polexengine.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from polexengine.syntax import Err, IOFailure, Ok


class TestOk:
    """Successful results."""

    def test_value_and_match(self) -> None:
        """Ok matches positionally on its value."""
        match Ok((1, 2)):
            case Ok(value):
                assert value == (1, 2)
            case _:
                pytest.fail("Ok did not match")


class TestErr:
    """The (line, reason) error value."""

    def test_unpacks_to_pair(self) -> None:
        """Iteration yields exactly line then reason."""
        err = Err(3, "unterminated string")
        assert tuple(err) == (3, "unterminated string")
        line, reason = err
        assert line == 3
        assert reason == "unterminated string"

    def test_match_positional(self) -> None:
        """Err matches positionally on (line, reason) only."""
        match Err(2, "expected msgstr"):
            case Err(line, reason):
                assert (line, reason) == (2, "expected msgstr")
            case _:
                pytest.fail("Err did not match")

    def test_line_must_be_positive(self) -> None:
        """Lines are 1-based."""
        with pytest.raises(ValueError, match=">= 1"):
            Err(0, "bad")

    def test_diagnostic_excluded_from_equality(self) -> None:
        """Comparisons ignore the attached diagnostic."""
        diagnostic = ErrorTemplate.unterminated_string(3)
        assert Err.from_diagnostic(diagnostic) == Err(3, "unterminated string")

    def test_from_diagnostic(self) -> None:
        """Line and message come from the diagnostic."""
        err = Err.from_diagnostic(ErrorTemplate.unknown_keyword("foo", 7))
        assert (err.line, err.reason) == (7, "unknown keyword 'foo'")
        assert err.diagnostic is not None
        assert err.diagnostic.code is DiagnosticCode.UNKNOWN_KEYWORD

    def test_from_diagnostic_requires_line(self) -> None:
        """Diagnostics without a line cannot become Err values."""
        diagnostic = Diagnostic(code=DiagnosticCode.FILE_READ_FAILED, message="x")
        with pytest.raises(ValueError, match="no line"):
            Err.from_diagnostic(diagnostic)


class TestIOFailure:
    """The (reason,) I/O failure value."""

    def test_unpacks_to_single_reason(self) -> None:
        """Shape differs from Err: one element only."""
        failure = IOFailure("enoent", path="missing.po")
        assert tuple(failure) == ("enoent",)

    def test_equality_ignores_path_and_error(self) -> None:
        """Only the reason takes part in equality."""
        error = FileNotFoundError(errno.ENOENT, "No such file or directory")
        assert IOFailure("enoent", path="a.po", error=error) == IOFailure("enoent")

    def test_distinguishable_by_match(self) -> None:
        """Callers tell the outcomes apart with match."""
        outcomes = [Ok(()), Err(1, "x"), IOFailure("eacces")]
        labels = []
        for outcome in outcomes:
            match outcome:
                case Ok():
                    labels.append("ok")
                case Err(line, _):
                    labels.append(f"syntax@{line}")
                case IOFailure(reason):
                    labels.append(f"io:{reason}")
        assert labels == ["ok", "syntax@1", "io:eacces"]
