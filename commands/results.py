"""Dispatch outcome codes and result models."""

from __future__ import annotations

from dataclasses import dataclass

CODE_OK = "OK"
CODE_BAD_INPUT = "BAD_INPUT"
CODE_UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
CODE_PLAYER_ONLY = "PLAYER_ONLY"
CODE_NO_PERMISSION = "NO_PERMISSION"
CODE_UNKNOWN_FLAG = "UNKNOWN_FLAG"
CODE_MISSING_FLAG_VALUE = "MISSING_FLAG_VALUE"
CODE_TOO_FEW_ARGUMENTS = "TOO_FEW_ARGUMENTS"
CODE_TOO_MANY_ARGUMENTS = "TOO_MANY_ARGUMENTS"
CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DispatchResult:
    command: str
    ok: bool
    code: str
    text: str = ""


@dataclass(frozen=True)
class InvocationResult:
    ok: bool
    error: BaseException | None = None

    @property
    def cause(self) -> str:
        if self.error is None:
            return ""
        return f"{type(self.error).__name__}: {self.error}"


def result_ok(command: str, text: str = "") -> DispatchResult:
    return DispatchResult(command=command, ok=True, code=CODE_OK, text=text)


def result_error(command: str, code: str, text: str) -> DispatchResult:
    return DispatchResult(command=command, ok=False, code=code, text=text)
