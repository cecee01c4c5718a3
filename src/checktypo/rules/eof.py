from __future__ import annotations

import re
from dataclasses import dataclass

from .model import MESSAGES, RuleName, Violation

_BLANK_RE = re.compile(r"[ \t]*")


@dataclass(frozen=True)
class EOFState:
    last_line: str = ""
    previous_line: str = ""
    line_count: int = 0


def advance_eof(state: EOFState, line: str) -> EOFState:
    return EOFState(last_line=line, previous_line=state.last_line, line_count=state.line_count + 1)


def finish_eof(state: EOFState) -> Violation | None:
    """Classify the end of the sentinel-terminated line stream.

    A non-empty final record means the content lacked a trailing LF. Otherwise a
    blank record just before the sentinel means trailing blank lines. A single
    empty record is an empty file and reports nothing. The two findings never
    co-fire, so the missing-lf case needs no shifted line count.
    """
    if state.last_line:
        return Violation(RuleName.MISSING_LF, state.line_count + 1, 1, MESSAGES[RuleName.MISSING_LF])
    if state.line_count <= 1:
        return None
    if _BLANK_RE.fullmatch(state.previous_line):
        return Violation(RuleName.WHITE_AT_EOF, state.line_count, 1, MESSAGES[RuleName.WHITE_AT_EOF])
    return None
