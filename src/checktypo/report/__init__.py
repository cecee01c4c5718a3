from __future__ import annotations

from .emitter import ReportEmitter, cap_notice

__all__ = ["ReportEmitter", "cap_notice"]
