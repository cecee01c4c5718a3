from __future__ import annotations

from .walk import iter_candidate_files

__all__ = ["iter_candidate_files"]
