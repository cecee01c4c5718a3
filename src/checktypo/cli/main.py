from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from .. import __version__
from ..core.config import SOURCE_KINDS, load_config
from ..core.context import RunContext
from ..core.errors import ScriptError
from ..core.exit_codes import ERR_FINDINGS, ERR_INTERNAL, ERR_USAGE, NOT_PRUNED, OK, PRUNED
from ..core.logging import log_event
from ..engine.runner import run_paths
from ..engine.scan import FileReport
from ..exceptions.git import GitAttributesSource
from ..exceptions.manifest import ManifestExceptionSource
from ..exceptions.source import CachingExceptionSource, ExceptionSource, NullExceptionSource, is_pruned
from ..rules.model import RuleName
from ..traversal.walk import iter_candidate_files
from .output import render_error

# unused-prop cannot be suppressed, so it gets no disabling flag.
DISABLE_FLAGS: tuple[str, ...] = tuple(rule.value for rule in RuleName if rule is not RuleName.UNUSED_PROP)


class _UsageAction(argparse.Action):
    def __init__(self, option_strings: list[str], dest: str = argparse.SUPPRESS, **kwargs: object) -> None:
        super().__init__(option_strings, dest=dest, nargs=0, default=argparse.SUPPRESS, help="show this help and exit")

    def __call__(self, parser, namespace, values, option_string=None) -> None:  # noqa: ANN001
        parser.print_help(sys.stdout)
        parser.exit(ERR_USAGE)


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got `{raw}`") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a value >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="checktypo",
        description="Check source files for typographic convention violations.",
        add_help=False,
        allow_abbrev=False,
    )
    p.add_argument("-help", "--help", action=_UsageAction)
    p.add_argument("--version", action="version", version=f"checktypo {__version__}")
    rules = p.add_argument_group("rule switches")
    for name in DISABLE_FLAGS:
        rules.add_argument(
            f"-{name}",
            dest="disabled",
            action="append_const",
            const=name,
            help=f"disable the [{name}] rule for every file",
        )
    p.add_argument("--jobs", type=_positive_int, help="number of files checked in parallel")
    p.add_argument("--source", choices=SOURCE_KINDS, help="where per-path exceptions come from")
    p.add_argument("--manifest", help="exception manifest path (with --source manifest)")
    p.add_argument("--config", help="YAML configuration file")
    p.add_argument("--log-json", action="store_true", help="emit structured logs as JSON on stderr")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only log warnings and errors")
    p.add_argument("--check-prune", metavar="DIR", help=argparse.SUPPRESS)
    p.add_argument("paths", nargs="*", help="files or directories to check (default: .)")
    p.set_defaults(disabled=[])
    return p


def build_source(ctx: RunContext) -> ExceptionSource:
    kind = ctx.config.source
    if kind == "git":
        inner: ExceptionSource = GitAttributesSource(ctx.cwd, ctx)
    elif kind == "manifest":
        inner = ManifestExceptionSource.from_file(ctx.config.manifest_path)
    else:
        inner = NullExceptionSource()
    return CachingExceptionSource(inner)


def _print_report(report: FileReport) -> None:
    for line in report.lines:
        print(line)
    if report.error:
        print(f"{report.path}: {report.error}", file=sys.stderr)
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(list(argv) if argv is not None else None)
    as_json = bool(ns.log_json)
    ctx: RunContext | None = None
    try:
        config = load_config(Path(ns.config) if ns.config else None).with_overrides(
            jobs=ns.jobs,
            source=ns.source,
            manifest_path=(Path(ns.manifest) if ns.manifest else None),
            log_json=(True if ns.log_json else None),
            verbose=(True if ns.verbose else None),
            quiet=(True if ns.quiet else None),
        )
        as_json = config.log_json
        ctx = RunContext.from_config(config)
        source = build_source(ctx)
        if ns.check_prune is not None:
            directory = Path(ns.check_prune)
            if not directory.is_dir():
                raise ScriptError.usage(f"--check-prune expects a directory, got `{directory}`")
            return PRUNED if is_pruned(source, directory) else NOT_PRUNED
        roots = [Path(item) for item in (ns.paths or ["."])]
        files = iter_candidate_files(roots, source, config.prune_names, ctx)
        summary, _ = run_paths(ctx, files, source, user_disabled=ns.disabled, on_report=_print_report)
        return OK if summary.ok else ERR_FINDINGS
    except ScriptError as exc:
        run_id = ctx.run_id if ctx is not None else ""
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind, run_id=run_id), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        if ctx is not None:
            log_event(ctx, "error", "cli", "internal-error", error=str(exc))
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


__all__ = ["DISABLE_FLAGS", "build_parser", "build_source", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
