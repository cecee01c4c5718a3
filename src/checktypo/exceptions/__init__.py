from __future__ import annotations

from .git import GitAttributesSource
from .manifest import ManifestExceptionSource
from .resolver import ExceptionSet, builtin_exceptions, is_fully_exempt_name, resolve_exceptions, resolve_for_path
from .source import (
    PRUNE_TOKEN,
    CachingExceptionSource,
    ExceptionSource,
    MappingExceptionSource,
    NullExceptionSource,
    PathMetadata,
    is_pruned,
    split_exception_list,
)

__all__ = [
    "PRUNE_TOKEN",
    "CachingExceptionSource",
    "ExceptionSet",
    "ExceptionSource",
    "GitAttributesSource",
    "ManifestExceptionSource",
    "MappingExceptionSource",
    "NullExceptionSource",
    "PathMetadata",
    "builtin_exceptions",
    "is_fully_exempt_name",
    "is_pruned",
    "resolve_exceptions",
    "resolve_for_path",
    "split_exception_list",
]
