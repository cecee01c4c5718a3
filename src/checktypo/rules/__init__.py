from __future__ import annotations

from .eof import EOFState, advance_eof, finish_eof
from .header import HeaderState, advance_header, finish_header
from .line import MATCHERS, classify_line, iter_line_violations
from .model import LINE_RULES, MAX_LINE_LENGTH, MESSAGES, REPORT_CAP, Match, RuleName, Violation, unused_message

__all__ = [
    "EOFState",
    "HeaderState",
    "LINE_RULES",
    "MATCHERS",
    "MAX_LINE_LENGTH",
    "MESSAGES",
    "Match",
    "REPORT_CAP",
    "RuleName",
    "Violation",
    "advance_eof",
    "advance_header",
    "classify_line",
    "finish_eof",
    "finish_header",
    "iter_line_violations",
    "unused_message",
]
