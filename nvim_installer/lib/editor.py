from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from .command import run_cmd, which

logger = logging.getLogger(__name__)

PROBE_TIMEOUT_S = 30.0


def probe_binary(path: str | Path) -> bool:
    """A binary is usable only if invoking it actually succeeds.

    Missing files, non-executables, exec format errors and missing shared
    libraries (non-zero exit) all count as unusable.
    """

    try:
        p = subprocess.run(
            [str(path), "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            timeout=PROBE_TIMEOUT_S,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Probe of %s failed: %s", path, e)
        return False
    logger.debug("Probe of %s exited %s", path, p.returncode)
    return p.returncode == 0


def choose_binary(candidates: Sequence[str | Path]) -> Optional[Path]:
    for c in candidates:
        if probe_binary(c):
            return Path(c)
    return None


def find_editor(name: str) -> Optional[str]:
    return which(name)


def editor_version(path: str) -> str:
    r = run_cmd([path, "--version"])
    lines = r.stdout.splitlines()
    return lines[0].strip() if lines else ""


def sync_plugins(path: str, sync_command: str) -> None:
    """Let the editor's plugin manager install everything, then quit.

    Output goes straight to the terminal; only the exit code is checked.
    """

    run_cmd([path, "--headless", sync_command, "+qa"], capture=False)
