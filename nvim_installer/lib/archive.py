from __future__ import annotations

import logging
import tarfile
import zlib
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


def create_tarball(out_path: Path, root: Path, members: Sequence[str]) -> Path:
    """Write a gzip tar of `members` (paths relative to `root`).

    Archive entries are rooted at `root`, so extracting into a home
    directory reproduces `.config/...` and `.local/...` as-is.
    """

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(out_path, "w:gz") as tar:
        for rel in members:
            src = root / rel
            if not src.exists():
                raise FileNotFoundError(str(src))
            tar.add(str(src), arcname=rel)
    logger.debug("Wrote archive %s (%s)", out_path, ", ".join(members))
    return out_path


def extract_tarball(archive: Path, dest: Path) -> None:
    """Extract a gzip tar into `dest`.

    Contents are not checked against any manifest. The `tar` filter only
    refuses absolute paths and members that would land outside `dest`.
    A truncated gzip stream is reported as `tarfile.ReadError`.
    """

    dest.mkdir(parents=True, exist_ok=True)
    try:
        with tarfile.open(archive, "r:gz") as tar:
            tar.extractall(path=str(dest), filter="tar")
    except (EOFError, zlib.error) as e:
        # gzip reports a cut-off stream outside the TarError hierarchy
        raise tarfile.ReadError(f"truncated or corrupt gzip stream: {e}") from e


def list_members(archive: Path) -> list[str]:
    with tarfile.open(archive, "r:gz") as tar:
        return tar.getnames()
