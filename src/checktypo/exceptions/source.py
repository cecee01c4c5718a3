"""Per-path metadata collaborators.

A source answers, for one path, whether it is tracked, whether it holds binary
content and which raw exception list is attached to it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

PRUNE_TOKEN = "prune"


@dataclass(frozen=True)
class PathMetadata:
    tracked: bool = True
    binary: bool = False
    exceptions: str = ""

    @classmethod
    def untracked(cls) -> PathMetadata:
        return cls(tracked=False, binary=False, exceptions="")


@runtime_checkable
class ExceptionSource(Protocol):
    def lookup(self, path: Path) -> PathMetadata:
        ...


def split_exception_list(raw: str) -> tuple[str, ...]:
    """Split a comma/space separated list, dropping blanks and duplicates."""
    seen: list[str] = []
    for token in raw.replace(",", " ").split():
        if token not in seen:
            seen.append(token)
    return tuple(seen)


def is_pruned(source: ExceptionSource, directory: Path) -> bool:
    meta = source.lookup(directory)
    return meta.tracked and PRUNE_TOKEN in split_exception_list(meta.exceptions)


class NullExceptionSource:
    def lookup(self, path: Path) -> PathMetadata:
        return PathMetadata()


class MappingExceptionSource:
    """In-memory source keyed by POSIX path or glob pattern."""

    def __init__(self, entries: Mapping[str, PathMetadata], default: PathMetadata | None = None) -> None:
        self._entries = dict(entries)
        self._default = default or PathMetadata()

    def lookup(self, path: Path) -> PathMetadata:
        key = path.as_posix()
        if key in self._entries:
            return self._entries[key]
        for pattern, meta in self._entries.items():
            if fnmatchcase(key, pattern):
                return meta
        return self._default


class CachingExceptionSource:
    def __init__(self, inner: ExceptionSource) -> None:
        self._inner = inner
        self._cache: dict[Path, PathMetadata] = {}
        self._lock = threading.Lock()

    def lookup(self, path: Path) -> PathMetadata:
        with self._lock:
            cached = self._cache.get(path)
        if cached is not None:
            return cached
        meta = self._inner.lookup(path)
        with self._lock:
            self._cache.setdefault(path, meta)
        return meta
