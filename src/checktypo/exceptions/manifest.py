"""YAML manifest source.

Example ``typo.yaml``::

    schema_version: 1
    paths:
      "vendor": {exceptions: prune}
      "docs/*.txt": {exceptions: [long-line, missing-header]}
      "assets/logo.bin": {binary: true}

Patterns are matched against paths relative to the manifest directory; the
first matching pattern wins.
"""

from __future__ import annotations

import json
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

from ..core.config import load_yaml_document
from ..core.errors import ScriptError
from .source import PathMetadata

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schemas" / "typo-manifest.schema.json"


def validate_manifest(payload: Any, origin: str) -> None:
    import jsonschema

    schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
    try:
        jsonschema.validate(payload, schema)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ScriptError.config(f"{origin}: manifest validation failed at {loc}: {exc.message}") from exc


def _entry_metadata(entry: dict[str, Any]) -> PathMetadata:
    raw = entry.get("exceptions", "")
    exceptions = raw if isinstance(raw, str) else ",".join(raw)
    return PathMetadata(
        tracked=bool(entry.get("tracked", True)),
        binary=bool(entry.get("binary", False)),
        exceptions=exceptions,
    )


class ManifestExceptionSource:
    def __init__(self, root: Path, patterns: list[tuple[str, PathMetadata]]) -> None:
        self._root = root
        self._patterns = patterns

    @classmethod
    def from_file(cls, manifest_path: Path) -> ManifestExceptionSource:
        payload = load_yaml_document(manifest_path)
        validate_manifest(payload, str(manifest_path))
        patterns = [(str(pattern), _entry_metadata(entry)) for pattern, entry in payload["paths"].items()]
        return cls(manifest_path.resolve().parent, patterns)

    def _relative(self, path: Path) -> str | None:
        try:
            return path.resolve().relative_to(self._root).as_posix()
        except ValueError:
            return None

    def lookup(self, path: Path) -> PathMetadata:
        rel = self._relative(path)
        if rel is None:
            return PathMetadata.untracked()
        for pattern, meta in self._patterns:
            if rel == pattern or fnmatchcase(rel, pattern):
                return meta
        return PathMetadata()
