from __future__ import annotations

from .runner import RunSummary, check_one, run_paths
from .scan import FileReport, FileScanState, scan_content, scan_file, split_records

__all__ = [
    "FileReport",
    "FileScanState",
    "RunSummary",
    "check_one",
    "run_paths",
    "scan_content",
    "scan_file",
    "split_records",
]
