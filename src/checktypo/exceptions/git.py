from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..core.logging import log_event
from ..core.process import run_command
from .source import PathMetadata

if TYPE_CHECKING:
    from ..core.context import RunContext

TYPO_ATTRIBUTE = "typo"
_UNSET_VALUES = {"unspecified", "unset"}


def _parse_check_attr(output: str) -> dict[str, str]:
    # `git check-attr -z` emits NUL separated <path> <attr> <value> triples.
    fields = output.split("\0")
    values: dict[str, str] = {}
    for index in range(0, len(fields) - 2, 3):
        values[fields[index + 1]] = fields[index + 2]
    return values


class GitAttributesSource:
    """Reads exceptions from the `typo` git attribute of each path."""

    def __init__(self, repo_root: Path, ctx: RunContext | None = None) -> None:
        self._repo_root = repo_root
        self._ctx = ctx

    def _log(self, level: str, action: str, path: Path, detail: str) -> None:
        if self._ctx is not None:
            log_event(self._ctx, level, "git-source", action, path=path.as_posix(), detail=detail)

    def lookup(self, path: Path) -> PathMetadata:
        target = str(path)
        listed = run_command(["git", "ls-files", "--error-unmatch", "--", target], self._repo_root)
        if listed.code != 0 and not (self._repo_root / path).is_dir():
            self._log("debug", "untracked", path, listed.combined_output)
            return PathMetadata.untracked()
        attrs = run_command(["git", "check-attr", "-z", TYPO_ATTRIBUTE, "binary", "--", target], self._repo_root)
        if attrs.code != 0:
            self._log("warn", "check-attr-failed", path, attrs.combined_output)
            return PathMetadata.untracked()
        values = _parse_check_attr(attrs.stdout)
        raw = values.get(TYPO_ATTRIBUTE, "unspecified")
        exceptions = "" if raw in _UNSET_VALUES or raw == "set" else raw
        return PathMetadata(tracked=True, binary=values.get("binary") == "set", exceptions=exceptions)
