from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from ..core.logging import log_event
from ..exceptions.source import ExceptionSource, is_pruned

if TYPE_CHECKING:
    from ..core.context import RunContext


def _note_pruned(ctx: RunContext | None, path: Path, reason: str) -> None:
    if ctx is not None:
        log_event(ctx, "debug", "traversal", "pruned", path=path.as_posix(), reason=reason)


def _walk_dir(
    root: Path,
    source: ExceptionSource,
    prune_names: frozenset[str],
    ctx: RunContext | None,
) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        kept = []
        for name in sorted(dirnames):
            if name in prune_names:
                _note_pruned(ctx, current / name, "name")
                continue
            if is_pruned(source, current / name):
                _note_pruned(ctx, current / name, "metadata")
                continue
            kept.append(name)
        dirnames[:] = kept
        for name in sorted(filenames):
            yield current / name


def iter_candidate_files(
    roots: Iterable[Path],
    source: ExceptionSource,
    prune_names: Iterable[str],
    ctx: RunContext | None = None,
) -> Iterator[Path]:
    """Yield files to check, in argument order then sorted walk order.

    Explicit file arguments are yielded as given, even when they do not exist,
    so the engine can report them as unreadable.
    """
    names = frozenset(prune_names)
    for root in roots:
        if root.is_dir():
            if is_pruned(source, root):
                _note_pruned(ctx, root, "metadata")
                continue
            yield from _walk_dir(root, source, names, ctx)
        else:
            yield root
