from __future__ import annotations

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: str
    stderr: str
    duration_ms: int

    @property
    def combined_output(self) -> str:
        return (self.stdout + self.stderr).strip()


def run_command(cmd: list[str], cwd: Path, timeout_seconds: int = 0) -> CommandResult:
    started = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            cwd=cwd,
            text=True,
            capture_output=True,
            check=False,
            timeout=(timeout_seconds if timeout_seconds > 0 else None),
        )
    except subprocess.TimeoutExpired as exc:
        return CommandResult(
            code=124,
            stdout=str(exc.stdout or ""),
            stderr=(str(exc.stderr or "") + f"\ncommand timed out after {timeout_seconds}s").strip(),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    except OSError as exc:
        return CommandResult(
            code=127,
            stdout="",
            stderr=str(exc),
            duration_ms=int((time.monotonic() - started) * 1000),
        )
    return CommandResult(
        code=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
        duration_ms=int((time.monotonic() - started) * 1000),
    )
