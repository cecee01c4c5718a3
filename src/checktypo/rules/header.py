from __future__ import annotations

from dataclasses import dataclass

from .model import MESSAGES, RuleName, Violation

MARKER_FIRST_LINE = 3
MARKER_LAST_LINE = 5
COPYRIGHT_MIN_OFFSET = 4
COPYRIGHT_MAX_OFFSET = 6
COPYRIGHT_MARKER = "Copyright"


@dataclass(frozen=True)
class HeaderState:
    project_marker_line: int | None = None
    copyright_found: bool = False

    @property
    def complete(self) -> bool:
        return self.project_marker_line is not None and self.copyright_found


def advance_header(state: HeaderState, line: str, lineno: int, markers: tuple[str, ...]) -> HeaderState:
    """Feed one line to the header scanner and return the next state.

    The project marker must sit on lines 3..5; the copyright marker must then
    appear between 4 and 6 lines below it. Later lines never change the state.
    """
    if state.project_marker_line is None:
        if MARKER_FIRST_LINE <= lineno <= MARKER_LAST_LINE and any(marker in line for marker in markers):
            return HeaderState(project_marker_line=lineno, copyright_found=state.copyright_found)
        return state
    if state.copyright_found:
        return state
    first = state.project_marker_line + COPYRIGHT_MIN_OFFSET
    last = state.project_marker_line + COPYRIGHT_MAX_OFFSET
    if first <= lineno <= last and COPYRIGHT_MARKER in line:
        return HeaderState(project_marker_line=state.project_marker_line, copyright_found=True)
    return state


def finish_header(state: HeaderState) -> Violation | None:
    if state.complete:
        return None
    return Violation(RuleName.MISSING_HEADER, 1, 1, MESSAGES[RuleName.MISSING_HEADER])
