from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_USAGE


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message

    @classmethod
    def usage(cls, message: str) -> ScriptError:
        return cls(message, ERR_USAGE, "usage_error")

    @classmethod
    def config(cls, message: str) -> ScriptError:
        return cls(message, ERR_CONFIG, "config_error")
