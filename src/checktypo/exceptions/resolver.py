from __future__ import annotations

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable

from ..rules.model import RuleName
from .source import ExceptionSource, PathMetadata, split_exception_list

FULL_EXEMPT_PATTERNS: tuple[str, ...] = ("*.reference", "reference")
TAB_EXEMPT_PATTERNS: tuple[str, ...] = ("Makefile*",)
HEADER_EXEMPT_PATTERNS: tuple[str, ...] = (
    ".depend*",
    ".ignore",
    "*.mlpack",
    "*.mllib",
    "*.mltop",
    "*.odocl",
    "*.clib",
    "*.itarget",
)


@dataclass(frozen=True)
class ExceptionSet:
    disabled: frozenset[str]
    listed: tuple[str, ...] = ()
    fully_exempt: bool = False

    def suppresses(self, rule: RuleName | str) -> bool:
        return str(rule) in self.disabled


def _matches(name: str, patterns: Iterable[str]) -> bool:
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def builtin_exceptions(path: Path) -> frozenset[str]:
    name = path.name
    extra: set[str] = set()
    if _matches(name, TAB_EXEMPT_PATTERNS):
        extra.add(RuleName.TAB.value)
    if _matches(name, HEADER_EXEMPT_PATTERNS):
        extra.add(RuleName.MISSING_HEADER.value)
    return frozenset(extra)


def is_fully_exempt_name(path: Path) -> bool:
    return _matches(path.name, FULL_EXEMPT_PATTERNS)


def resolve_exceptions(path: Path, user_disabled: Iterable[str], meta: PathMetadata) -> ExceptionSet:
    """Union every exception source for `path` into one disabled-rule set.

    Only the per-path list feeds the unused-exception check; user flags and
    built-in name patterns merely suppress.
    """
    listed = split_exception_list(meta.exceptions) if meta.tracked else ()
    exempt = is_fully_exempt_name(path) or (meta.tracked and meta.binary)
    disabled = frozenset(user_disabled) | builtin_exceptions(path) | frozenset(listed)
    return ExceptionSet(disabled=disabled, listed=listed, fully_exempt=exempt)


def resolve_for_path(path: Path, user_disabled: Iterable[str], source: ExceptionSource) -> ExceptionSet:
    return resolve_exceptions(path, user_disabled, source.lookup(path))
