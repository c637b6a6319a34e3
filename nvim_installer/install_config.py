from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ErrorKind, InstallerError

CONFIG_ENV_VAR = "NVIM_INSTALLER_CONFIG"
DEFAULT_CONFIG_NAME = "installer.yaml"

DEFAULT_NVIM_VERSION = "v0.10.4"
DEFAULT_NVIM_ASSET = "nvim-linux-x86_64"
DEFAULT_RELEASE_URL = "https://github.com/neovim/neovim/releases/download"


@dataclass(frozen=True)
class InstallConfig:
    raw: Dict[str, Any] = field(default_factory=dict)
    source: Optional[str] = None

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def editor(self) -> str:
        return str(self.raw.get("editor") or "nvim")

    @property
    def plugin_manager_dir(self) -> str:
        return str(self.raw.get("plugin_manager_dir") or "lazy")

    @property
    def bundle_name(self) -> str:
        return str(self.raw.get("bundle_name") or "nvim-bundle.tar.gz")

    @property
    def sync_command(self) -> str:
        return str(self.raw.get("sync_command") or "+Lazy! sync")

    @property
    def nvim_version(self) -> str:
        return str(self._section("nvim").get("version") or DEFAULT_NVIM_VERSION)

    @property
    def nvim_asset(self) -> str:
        return str(self._section("nvim").get("asset") or DEFAULT_NVIM_ASSET)

    @property
    def release_url(self) -> str:
        return str(self._section("nvim").get("release_url") or DEFAULT_RELEASE_URL).rstrip("/")

    @property
    def airgap_output_dir(self) -> str:
        return str(self._section("airgap").get("output_dir") or "nvim-airgapped")

    @property
    def airgap_strip_plugin_entries(self) -> List[str]:
        entries = self._section("airgap").get("strip_plugin_entries")
        if entries is None:
            return ["readme"]
        return [str(e) for e in entries]

    @property
    def airgap_probe_downloads(self) -> bool:
        value = self._section("airgap").get("probe_downloads")
        return True if value is None else bool(value)

    @property
    def home(self) -> Optional[str]:
        return self._section("paths").get("home")

    @property
    def tool_dir(self) -> Optional[str]:
        return self._section("paths").get("tool_dir")

    @property
    def source_dir(self) -> Optional[str]:
        return self._section("paths").get("source_dir")

    @property
    def log_path(self) -> Optional[str]:
        value = self.raw.get("log_path")
        return str(Path(value).expanduser()) if value else None


def find_config_path(tool_dir: Path) -> Optional[Path]:
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    candidate = tool_dir / DEFAULT_CONFIG_NAME
    if candidate.is_file():
        return candidate
    return None


def load_install_config(path: Optional[str | Path]) -> InstallConfig:
    """Load installer config from YAML; `None` means built-in defaults."""

    if path is None:
        return InstallConfig()

    p = Path(path)
    if not p.is_file():
        raise InstallerError(ErrorKind.CONFIG, f"Config file not found: {p}")

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise InstallerError(ErrorKind.CONFIG, f"Invalid YAML in {p}: {e}") from e

    if not isinstance(raw, dict):
        raise InstallerError(ErrorKind.CONFIG, f"{p} must contain a mapping/object")

    return InstallConfig(raw=raw, source=str(p))
