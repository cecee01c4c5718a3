"""Run configuration: defaults, environment, optional YAML file."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Literal

from .env import getenv, getenv_bool
from .errors import ScriptError

SourceKind = Literal["none", "git", "manifest"]

SOURCE_KINDS: tuple[str, ...] = ("none", "git", "manifest")
DEFAULT_PRUNE_NAMES: tuple[str, ...] = (".git", ".svn", ".hg", "_build")
DEFAULT_HEADER_MARKERS: tuple[str, ...] = (" OCaml ", " ocamlbuild ", " OCamldoc ")
DEFAULT_MANIFEST = "typo.yaml"

_CONFIG_KEYS = {"jobs", "prune_names", "header_markers", "source", "manifest_path"}


@dataclass(frozen=True)
class TypoConfig:
    jobs: int
    prune_names: tuple[str, ...] = DEFAULT_PRUNE_NAMES
    header_markers: tuple[str, ...] = DEFAULT_HEADER_MARKERS
    source: SourceKind = "none"
    manifest_path: Path = Path(DEFAULT_MANIFEST)
    log_json: bool = False
    verbose: bool = False
    quiet: bool = False

    def with_overrides(self, **changes: Any) -> TypoConfig:
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)


def default_jobs() -> int:
    return max(1, os.cpu_count() or 1)


def _parse_jobs(raw: object, origin: str) -> int:
    try:
        jobs = int(str(raw))
    except ValueError as exc:
        raise ScriptError.config(f"{origin}: jobs must be an integer, got `{raw}`") from exc
    if jobs < 1:
        raise ScriptError.config(f"{origin}: jobs must be >= 1, got {jobs}")
    return jobs


def _parse_source(raw: object, origin: str) -> SourceKind:
    value = str(raw).strip()
    if value not in SOURCE_KINDS:
        raise ScriptError.config(f"{origin}: source must be one of {', '.join(SOURCE_KINDS)}, got `{value}`")
    return value  # type: ignore[return-value]


def _string_tuple(raw: object, origin: str, key: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ScriptError.config(f"{origin}: `{key}` must be a list of strings")
    return tuple(raw)


def load_yaml_document(path: Path) -> Any:
    import yaml

    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except OSError as exc:
        raise ScriptError.config(f"cannot read {path}: {exc.strerror}") from exc
    except yaml.YAMLError as exc:
        raise ScriptError.config(f"invalid YAML in {path}: {exc}") from exc


def load_yaml_config(path: Path) -> dict[str, Any]:
    data = load_yaml_document(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ScriptError.config(f"{path}: root must be mapping")
    unknown = sorted(set(data) - _CONFIG_KEYS)
    if unknown:
        raise ScriptError.config(f"{path}: unknown config key(s): {', '.join(unknown)}")
    return data


def load_config(config_path: Path | None = None) -> TypoConfig:
    cfg = TypoConfig(
        jobs=default_jobs(),
        log_json=getenv_bool("CHECKTYPO_LOG_JSON"),
    )
    if config_path is not None:
        origin = str(config_path)
        data = load_yaml_config(config_path)
        if "jobs" in data:
            cfg = replace(cfg, jobs=_parse_jobs(data["jobs"], origin))
        if "prune_names" in data:
            cfg = replace(cfg, prune_names=_string_tuple(data["prune_names"], origin, "prune_names"))
        if "header_markers" in data:
            cfg = replace(cfg, header_markers=_string_tuple(data["header_markers"], origin, "header_markers"))
        if "source" in data:
            cfg = replace(cfg, source=_parse_source(data["source"], origin))
        if "manifest_path" in data:
            cfg = replace(cfg, manifest_path=(config_path.parent / str(data["manifest_path"])))

    env_jobs = getenv("CHECKTYPO_JOBS")
    if env_jobs:
        cfg = replace(cfg, jobs=_parse_jobs(env_jobs, "CHECKTYPO_JOBS"))
    env_source = getenv("CHECKTYPO_SOURCE")
    if env_source:
        cfg = replace(cfg, source=_parse_source(env_source, "CHECKTYPO_SOURCE"))
    env_manifest = getenv("CHECKTYPO_MANIFEST")
    if env_manifest:
        cfg = replace(cfg, manifest_path=Path(env_manifest))
    return cfg
