from __future__ import annotations

import pytest
from checktypo.engine.scan import split_records
from checktypo.rules.eof import EOFState, advance_eof, finish_eof
from checktypo.rules.model import RuleName


def _finish(content: bytes):
    state = EOFState()
    for line in split_records(content):
        state = advance_eof(state, line)
    return finish_eof(state)


@pytest.mark.parametrize(
    ("content", "records"),
    [
        (b"", [""]),
        (b"x", ["x"]),
        (b"x\n", ["x", ""]),
        (b"x\r\n\n", ["x\r", "", ""]),
    ],
)
def test_split_records_appends_sentinel(content: bytes, records: list[str]) -> None:
    assert split_records(content) == records


def test_missing_trailing_linefeed() -> None:
    finding = _finish(b"x")
    assert finding is not None
    assert (finding.rule, finding.line, finding.column) == (RuleName.MISSING_LF, 2, 1)


def test_two_trailing_linefeeds_is_white_at_eof() -> None:
    finding = _finish(b"x\n\n")
    assert finding is not None
    assert (finding.rule, finding.line, finding.column) == (RuleName.WHITE_AT_EOF, 3, 1)


def test_whitespace_only_last_line_counts_as_blank() -> None:
    finding = _finish(b"x\n \t\n")
    assert finding is not None and finding.rule is RuleName.WHITE_AT_EOF


@pytest.mark.parametrize("content", [b"", b"x\n", b"a\nb\n"])
def test_well_terminated_content_is_clean(content: bytes) -> None:
    assert _finish(content) is None


def test_missing_lf_and_white_at_eof_are_exclusive() -> None:
    finding = _finish(b"x\n  ")
    assert finding is not None
    assert (finding.rule, finding.line) == (RuleName.MISSING_LF, 3)
