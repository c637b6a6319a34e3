from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .install_config import InstallConfig

# nvim_installer/context.py -> nvim_installer -> repo root
TOOL_ROOT = Path(__file__).resolve().parents[1]


def default_tool_dir() -> Path:
    """The repo checkout when running from one, else the working directory.

    A non-editable install puts the package in site-packages, where there is
    no `nvim/` source tree and no place for a bundle.
    """

    if (TOOL_ROOT / "pyproject.toml").is_file():
        return TOOL_ROOT
    return Path.cwd()


@dataclass(frozen=True)
class InstallContext:
    """Every filesystem location an installer step is allowed to touch."""

    cfg: InstallConfig
    home: Path
    tool_dir: Path

    @classmethod
    def from_config(
        cls,
        cfg: InstallConfig,
        *,
        home: Optional[Path] = None,
        tool_dir: Optional[Path] = None,
    ) -> "InstallContext":
        if home is None:
            home = Path(cfg.home).expanduser() if cfg.home else Path.home()
        if tool_dir is None:
            tool_dir = Path(cfg.tool_dir).expanduser() if cfg.tool_dir else default_tool_dir()
        return cls(cfg=cfg, home=Path(home), tool_dir=Path(tool_dir))

    @property
    def editor(self) -> str:
        return self.cfg.editor

    @property
    def config_dir(self) -> Path:
        return self.home / ".config" / self.editor

    @property
    def data_dir(self) -> Path:
        return self.home / ".local" / "share" / self.editor

    @property
    def plugin_dir(self) -> Path:
        return self.data_dir / self.cfg.plugin_manager_dir

    @property
    def source_dir(self) -> Path:
        if self.cfg.source_dir:
            return Path(self.cfg.source_dir).expanduser()
        return self.tool_dir / self.editor

    @property
    def bundle_path(self) -> Path:
        return self.tool_dir / self.cfg.bundle_name

    @property
    def airgap_dir(self) -> Path:
        return self.home / self.cfg.airgap_output_dir

    @property
    def tarball_name(self) -> str:
        return f"{self.cfg.nvim_asset}.tar.gz"

    @property
    def appimage_name(self) -> str:
        return f"{self.cfg.nvim_asset}.appimage"

    def release_asset_url(self, filename: str) -> str:
        return f"{self.cfg.release_url}/{self.cfg.nvim_version}/{filename}"
