from __future__ import annotations

import re
from collections import Counter

import pytest
from checktypo.engine.scan import scan_content
from checktypo.exceptions.resolver import ExceptionSet
from checktypo.rules.model import REPORT_CAP, RuleName
from hypothesis import given
from hypothesis import strategies as st

_LINE_RE = re.compile(r"^f\.ml:(\d+)\.(\d+): \[([a-z-]+)\] .+$")
_rules = st.sampled_from([rule.value for rule in RuleName if rule is not RuleName.UNUSED_PROP])
_content = st.binary(max_size=3000) | st.lists(
    st.sampled_from([b"\t", b"x" * 90, b"\xe9", b"\x01", b" ", b"$Id$", b"ok", b"\n", b"\n\n"]), max_size=200
).map(b"".join)


def _parse(lines: tuple[str, ...]) -> list[tuple[int, int, str]]:
    parsed = []
    for line in lines:
        if line.startswith("WARNING: too many ["):
            continue
        found = _LINE_RE.match(line)
        assert found is not None, line
        parsed.append((int(found.group(1)), int(found.group(2)), found.group(3)))
    return parsed


@pytest.mark.unit
@given(_content)
def test_no_rule_exceeds_the_cap(content: bytes) -> None:
    report = scan_content("f.ml", content, ExceptionSet(disabled=frozenset()))
    parsed = _parse(report.lines)
    counts = Counter(rule for _, _, rule in parsed)
    assert all(count <= REPORT_CAP for count in counts.values())
    assert set(counts) <= set(RuleName.names())
    assert all(line >= 1 and column >= 1 for line, column, _ in parsed)
    notices = [line for line in report.lines if line.startswith("WARNING")]
    assert len(notices) == sum(1 for count in counts.values() if count == REPORT_CAP)


@pytest.mark.unit
@given(_content, st.frozensets(_rules))
def test_user_disables_only_remove_lines(content: bytes, disabled: frozenset[str]) -> None:
    full = scan_content("f.ml", content, ExceptionSet(disabled=frozenset()))
    reduced = scan_content("f.ml", content, ExceptionSet(disabled=disabled))
    assert set(reduced.lines) <= set(full.lines)
    assert not any(f"[{rule}]" in line for line in reduced.lines for rule in disabled)


@pytest.mark.unit
@given(_content)
def test_file_level_findings_sit_on_line_one(content: bytes) -> None:
    report = scan_content("f.ml", content, ExceptionSet(disabled=frozenset(), listed=("tab", "long-line")))
    for line, column, rule in _parse(report.lines):
        if rule in {RuleName.MISSING_HEADER.value, RuleName.UNUSED_PROP.value}:
            assert (line, column) == (1, 1)
