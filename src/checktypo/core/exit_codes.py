from __future__ import annotations

OK = 0
ERR_FINDINGS = 1
ERR_USAGE = 2
NOT_PRUNED = 3
ERR_CONFIG = 4
ERR_INTERNAL = 99

# `--check-prune` answers with OK when the directory is pruned.
PRUNED = OK
