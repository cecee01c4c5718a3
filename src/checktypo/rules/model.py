from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_LINE_LENGTH = 80
REPORT_CAP = 10


class RuleName(str, Enum):
    TAB = "tab"
    NON_ASCII = "non-ascii"
    NON_PRINTING = "non-printing"
    WHITE_AT_EOL = "white-at-eol"
    SVN_KEYWORD = "svn-keyword"
    LONG_LINE = "long-line"
    MISSING_LF = "missing-lf"
    WHITE_AT_EOF = "white-at-eof"
    MISSING_HEADER = "missing-header"
    UNUSED_PROP = "unused-prop"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(rule.value for rule in cls)


# Evaluation order inside a single line.
LINE_RULES: tuple[RuleName, ...] = (
    RuleName.TAB,
    RuleName.NON_ASCII,
    RuleName.NON_PRINTING,
    RuleName.WHITE_AT_EOL,
    RuleName.SVN_KEYWORD,
    RuleName.LONG_LINE,
)

MESSAGES: dict[RuleName, str] = {
    RuleName.TAB: "TAB character(s)",
    RuleName.NON_ASCII: "non-ASCII character(s)",
    RuleName.NON_PRINTING: "non-printing character(s)",
    RuleName.WHITE_AT_EOL: "whitespace at end of line",
    RuleName.SVN_KEYWORD: "SVN keyword marker",
    RuleName.LONG_LINE: f"line is over {MAX_LINE_LENGTH} columns",
    RuleName.MISSING_LF: "missing linefeed at EOF",
    RuleName.WHITE_AT_EOF: "empty line(s) at EOF",
    RuleName.MISSING_HEADER: "missing copyright header",
}


def unused_message(entry: str) -> str:
    return f"unused [{entry}] in exception list"


@dataclass(frozen=True)
class Match:
    """A matched span; `start` is a 0-based offset into the line."""

    start: int
    length: int

    @property
    def column(self) -> int:
        return self.start + 1 + self.length


@dataclass(frozen=True)
class Violation:
    rule: RuleName
    line: int
    column: int
    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule", RuleName(self.rule))
        if self.line < 1 or self.column < 1:
            raise ValueError(f"violation position must be positive, got {self.line}.{self.column}")

    def format(self, path: str) -> str:
        return f"{path}:{self.line}.{self.column}: [{self.rule.value}] {self.message}"
