from __future__ import annotations

from collections import Counter

from ..exceptions.resolver import ExceptionSet
from ..rules.model import REPORT_CAP, RuleName, Violation, unused_message


def cap_notice(rule: RuleName) -> str:
    return f"WARNING: too many [{rule.value}] in this file.  Others will not be reported."


class ReportEmitter:
    """Counts, suppresses and caps the violations of one file.

    Every violation is counted, suppressed or not; the counts decide both the
    per-rule cap and which listed exceptions went unused.
    """

    def __init__(self, path: str, exceptions: ExceptionSet) -> None:
        self.path = path
        self.exceptions = exceptions
        self.counts: Counter[str] = Counter()
        self.lines: list[str] = []
        self.reported = 0

    def _suppressed(self, rule: RuleName) -> bool:
        if rule is RuleName.UNUSED_PROP:
            return False
        return self.exceptions.suppresses(rule)

    def feed(self, violation: Violation) -> None:
        rule = violation.rule
        self.counts[rule.value] += 1
        count = self.counts[rule.value]
        if self._suppressed(rule) or count > REPORT_CAP:
            return
        self.lines.append(violation.format(self.path))
        self.reported += 1
        if count == REPORT_CAP:
            self.lines.append(cap_notice(rule))

    def finish(self) -> list[str]:
        for entry in self.exceptions.listed:
            if not self.counts[entry]:
                self.feed(Violation(RuleName.UNUSED_PROP, 1, 1, unused_message(entry)))
        return self.lines
