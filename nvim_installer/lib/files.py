from __future__ import annotations

import logging
import shutil
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def backup_path_for(path: Path, now: datetime) -> Path:
    return path.with_name(f"{path.name}.backup.{now.strftime(BACKUP_TIMESTAMP_FORMAT)}")


def backup_existing(path: Path, *, now: Optional[datetime] = None) -> Optional[Path]:
    """Rename an existing directory aside; never delete it.

    Returns the backup path, or None when there was nothing to back up.
    Two backups within the same second collide and the rename fails.
    """

    if not path.exists():
        return None

    backup = backup_path_for(path, now or datetime.now())
    if backup.exists():
        raise FileExistsError(f"Backup target already exists: {backup}")
    logger.warning("Existing %s found. Backing up to: %s", path, backup)
    path.rename(backup)
    return backup


def copy_tree(src: Path, dst: Path, *, exclude: Sequence[str] = ()) -> None:
    """Copy a directory tree, keeping symlinks as symlinks.

    `exclude` holds glob patterns matched against entry names at any depth.
    """

    if not src.is_dir():
        raise FileNotFoundError(str(src))

    dst.parent.mkdir(parents=True, exist_ok=True)
    ignore = shutil.ignore_patterns(*exclude) if exclude else None
    shutil.copytree(src, dst, symlinks=True, ignore=ignore)
    logger.debug("Copied tree %s -> %s", src, dst)


def remove_entries(root: Path, patterns: Iterable[str]) -> list[Path]:
    """Remove top-level entries of `root` matching any glob pattern."""

    removed: list[Path] = []
    for pattern in patterns:
        for entry in sorted(root.glob(pattern)):
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
            removed.append(entry)
    for entry in removed:
        logger.debug("Removed %s", entry)
    return removed


def tree_size(path: Path) -> int:
    if path.is_file():
        return path.stat().st_size
    total = 0
    for item in path.rglob("*"):
        if item.is_file() and not item.is_symlink():
            total += item.stat().st_size
    return total


def format_size(num_bytes: int) -> str:
    size = float(num_bytes)
    for unit in ("B", "K", "M", "G"):
        if size < 1024 or unit == "G":
            return f"{int(size)}{unit}" if unit == "B" else f"{size:.1f}{unit}"
        size /= 1024
    return f"{size:.1f}G"


def make_executable(path: Path) -> None:
    mode = path.stat().st_mode
    path.chmod(mode | 0o111)
