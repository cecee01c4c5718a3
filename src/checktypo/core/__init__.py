"""Shared runtime helpers: errors, exit codes, context, config, logging."""

from __future__ import annotations

from .errors import ScriptError
from .exit_codes import ERR_CONFIG, ERR_FINDINGS, ERR_INTERNAL, ERR_USAGE, NOT_PRUNED, OK

__all__ = [
    "ERR_CONFIG",
    "ERR_FINDINGS",
    "ERR_INTERNAL",
    "ERR_USAGE",
    "NOT_PRUNED",
    "OK",
    "ScriptError",
]
