from __future__ import annotations

import logging
from pathlib import Path

from ..errors import ErrorKind, InstallerError
from .command import run_cmd, which

logger = logging.getLogger(__name__)

FETCHERS = ("curl", "wget")


def pick_fetcher() -> str:
    """Return the first available HTTP fetch tool."""

    for name in FETCHERS:
        if which(name):
            return name
    raise InstallerError(
        ErrorKind.MISSING_PREREQUISITE,
        "Neither curl nor wget is available",
        hint="Install curl or wget to download Neovim releases",
    )


def fetch_argv(fetcher: str, url: str, dest: Path) -> list[str]:
    if fetcher == "curl":
        return ["curl", "-fL", "--progress-bar", "-o", str(dest), url]
    if fetcher == "wget":
        return ["wget", "-q", "--show-progress", "-O", str(dest), url]
    raise ValueError(f"Unknown fetcher: {fetcher}")


def download_file(url: str, dest: Path, *, fetcher: str) -> Path:
    dest.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading %s", url)
    run_cmd(fetch_argv(fetcher, url, dest), capture=False)
    return dest


def verify_download(path: Path) -> int:
    """Presence and size check only; there is no checksum to compare against."""

    if not path.is_file():
        raise InstallerError(ErrorKind.DOWNLOAD_INTEGRITY, f"Download missing: {path}")
    size = path.stat().st_size
    if size == 0:
        raise InstallerError(ErrorKind.DOWNLOAD_INTEGRITY, f"Download is empty: {path}")
    return size
