from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..core.config import DEFAULT_HEADER_MARKERS
from ..exceptions.resolver import ExceptionSet
from ..report.emitter import ReportEmitter
from ..rules.eof import EOFState, advance_eof, finish_eof
from ..rules.header import HeaderState, advance_header, finish_header
from ..rules.line import iter_line_violations


@dataclass(frozen=True)
class FileReport:
    path: str
    lines: tuple[str, ...] = ()
    reported: int = 0
    skipped: bool = False
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error and self.reported == 0


@dataclass
class FileScanState:
    header: HeaderState = field(default_factory=HeaderState)
    eof: EOFState = field(default_factory=EOFState)


def split_records(content: bytes) -> list[str]:
    # One byte per character; the appended LF terminates the last record.
    text = (content + b"\n").decode("latin-1")
    return text.split("\n")[:-1]


def scan_content(
    path: str,
    content: bytes,
    exceptions: ExceptionSet,
    markers: tuple[str, ...] = DEFAULT_HEADER_MARKERS,
) -> FileReport:
    if exceptions.fully_exempt:
        return FileReport(path=path, skipped=True)
    emitter = ReportEmitter(path, exceptions)
    state = FileScanState()
    for lineno, line in enumerate(split_records(content), start=1):
        for violation in iter_line_violations(line, lineno):
            emitter.feed(violation)
        state.header = advance_header(state.header, line, lineno, markers)
        state.eof = advance_eof(state.eof, line)
    for finding in (finish_eof(state.eof), finish_header(state.header)):
        if finding is not None:
            emitter.feed(finding)
    lines = emitter.finish()
    return FileReport(path=path, lines=tuple(lines), reported=emitter.reported)


def scan_file(
    path: Path,
    exceptions: ExceptionSet,
    markers: tuple[str, ...] = DEFAULT_HEADER_MARKERS,
) -> FileReport:
    display = str(path)
    if exceptions.fully_exempt:
        return FileReport(path=display, skipped=True)
    try:
        content = path.read_bytes()
    except OSError as exc:
        return FileReport(path=display, error=f"cannot read file: {exc.strerror or exc}")
    return scan_content(display, content, exceptions, markers)
