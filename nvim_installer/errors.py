from __future__ import annotations

import enum
from typing import Optional, Sequence


class ErrorKind(str, enum.Enum):
    MISSING_PREREQUISITE = "missing_prerequisite"
    SUBPROCESS = "subprocess"
    DOWNLOAD_INTEGRITY = "download_integrity"
    VERIFICATION = "verification"
    FILESYSTEM = "filesystem"
    ARCHIVE = "archive"
    CONFIG = "config"


class InstallerError(RuntimeError):
    """A fatal, user-visible installer failure.

    `hint` is an optional corrective instruction printed after the message.
    `step_id` is filled in by the pipeline when the error escapes a step.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        hint: Optional[str] = None,
        step_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.hint = hint
        self.step_id = step_id

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"


class CommandError(InstallerError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        msg = f"Command failed ({returncode}): {' '.join(self.argv)}"
        if stderr.strip():
            msg += f"\n{stderr.strip()}"
        super().__init__(ErrorKind.SUBPROCESS, msg)
