"""CLI output helpers."""

from __future__ import annotations

import json


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error", run_id: str = "") -> str:
    if not as_json:
        return message
    return json.dumps(
        {
            "schema_name": "checktypo.error.v1",
            "schema_version": 1,
            "tool": "checktypo",
            "run_id": run_id,
            "status": "error",
            "errors": [{"code": code, "kind": kind, "message": message}],
        },
        sort_keys=True,
    )
