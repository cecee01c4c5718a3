from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .config import TypoConfig
from .env import getenv


@dataclass(frozen=True)
class RunContext:
    run_id: str
    config: TypoConfig
    cwd: Path

    @property
    def log_json(self) -> bool:
        return self.config.log_json

    @property
    def verbose(self) -> bool:
        return self.config.verbose

    @property
    def quiet(self) -> bool:
        return self.config.quiet

    @classmethod
    def from_config(cls, config: TypoConfig, run_id: str | None = None, cwd: Path | None = None) -> RunContext:
        default_run = f"typo-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}-{uuid.uuid4().hex[:8]}"
        resolved_run_id = run_id or getenv("RUN_ID") or default_run
        return cls(run_id=resolved_run_id, config=config, cwd=(cwd or Path.cwd()))
