from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from ..core.context import RunContext
from ..core.logging import log_event
from ..exceptions.resolver import resolve_for_path
from ..exceptions.source import ExceptionSource
from .scan import FileReport, scan_file


@dataclass(frozen=True)
class RunSummary:
    files: int
    skipped: int
    failed: int
    reported: int

    @property
    def ok(self) -> bool:
        return self.failed == 0 and self.reported == 0


def check_one(path: Path, user_disabled: frozenset[str], source: ExceptionSource, markers: tuple[str, ...]) -> FileReport:
    exceptions = resolve_for_path(path, user_disabled, source)
    return scan_file(path, exceptions, markers)


def run_paths(
    ctx: RunContext,
    paths: Iterable[Path],
    source: ExceptionSource,
    user_disabled: Iterable[str] = (),
    on_report: Callable[[FileReport], None] | None = None,
) -> tuple[RunSummary, list[FileReport]]:
    disabled = frozenset(user_disabled)
    markers = ctx.config.header_markers
    jobs = max(1, ctx.config.jobs)
    files = list(paths)
    log_event(ctx, "info", "engine", "run-start", files=len(files), jobs=jobs, disabled=",".join(sorted(disabled)))

    def _run_one(path: Path) -> FileReport:
        return check_one(path, disabled, source, markers)

    reports: list[FileReport] = []
    if jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            # map() keeps input order, so each file's lines stay contiguous.
            for report in ex.map(_run_one, files):
                reports.append(report)
                if on_report is not None:
                    on_report(report)
    else:
        for path in files:
            report = _run_one(path)
            reports.append(report)
            if on_report is not None:
                on_report(report)

    for report in reports:
        if report.error:
            log_event(ctx, "error", "engine", "read-failed", path=report.path, error=report.error)
        elif report.skipped:
            log_event(ctx, "debug", "engine", "skipped", path=report.path)
    summary = RunSummary(
        files=len(reports),
        skipped=sum(1 for r in reports if r.skipped),
        failed=sum(1 for r in reports if r.error),
        reported=sum(r.reported for r in reports),
    )
    log_event(
        ctx,
        "info",
        "engine",
        "run-finish",
        files=summary.files,
        skipped=summary.skipped,
        failed=summary.failed,
        reported=summary.reported,
    )
    return summary, reports
