"""Per-line lexical rules.

Every matcher takes one line (terminator excluded, bytes decoded as latin-1 so
offsets are byte offsets) and returns the first offending span or ``None``.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator

from .model import LINE_RULES, MAX_LINE_LENGTH, MESSAGES, Match, RuleName, Violation

Matcher = Callable[[str], "Match | None"]

_TAB_RE = re.compile(r"\t")
_NON_ASCII_RE = re.compile(r"[\x80-\xff]")
_NON_PRINTING_RE = re.compile(r"[^\t\x80-\xff -~]")
_WHITE_AT_EOL_RE = re.compile(r"[ \t]+\Z")
_SVN_KEYWORD_RE = re.compile(r"\$Id(?:: .*)?\$")


def _search(pattern: re.Pattern[str], line: str) -> Match | None:
    found = pattern.search(line)
    if found is None:
        return None
    return Match(found.start(), found.end() - found.start())


def match_tab(line: str) -> Match | None:
    return _search(_TAB_RE, line)


def match_non_ascii(line: str) -> Match | None:
    return _search(_NON_ASCII_RE, line)


def match_non_printing(line: str) -> Match | None:
    return _search(_NON_PRINTING_RE, line)


def match_white_at_eol(line: str) -> Match | None:
    return _search(_WHITE_AT_EOL_RE, line)


def match_svn_keyword(line: str) -> Match | None:
    return _search(_SVN_KEYWORD_RE, line)


def match_long_line(line: str) -> Match | None:
    # Reported at a fixed column, one past the limit.
    if len(line) > MAX_LINE_LENGTH:
        return Match(MAX_LINE_LENGTH, 0)
    return None


MATCHERS: dict[RuleName, Matcher] = {
    RuleName.TAB: match_tab,
    RuleName.NON_ASCII: match_non_ascii,
    RuleName.NON_PRINTING: match_non_printing,
    RuleName.WHITE_AT_EOL: match_white_at_eol,
    RuleName.SVN_KEYWORD: match_svn_keyword,
    RuleName.LONG_LINE: match_long_line,
}


def iter_line_violations(line: str, lineno: int) -> Iterator[Violation]:
    for rule in LINE_RULES:
        found = MATCHERS[rule](line)
        if found is not None:
            yield Violation(rule, lineno, found.column, MESSAGES[rule])


def classify_line(line: str, lineno: int) -> list[Violation]:
    return list(iter_line_violations(line, lineno))
