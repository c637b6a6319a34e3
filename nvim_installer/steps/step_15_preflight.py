from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..errors import ErrorKind, InstallerError

logger = logging.getLogger(__name__)


class RequireSourceStep:
    """online: the config tree shipped next to the installer must exist."""

    step_id = "15_require_source"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        if not ctx.source_dir.is_dir():
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"Configuration source not found at: {ctx.source_dir}",
            )
        return state


class RequireBundleStep:
    """offline: a bundle archive must sit next to the tool."""

    step_id = "15_require_bundle"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        if not ctx.bundle_path.is_file():
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"Bundle file not found: {ctx.bundle_path}",
                hint="Create one with: nvim-installer bundle",
            )
        return state


class RequireInstalledStep:
    """bundle/airgapped: config and plugins must already be installed."""

    step_id = "15_require_installed"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        if not ctx.config_dir.is_dir():
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"Neovim config not found at: {ctx.config_dir}",
                hint="Install it first with: nvim-installer online",
            )
        if not ctx.plugin_dir.is_dir():
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"Plugins not found at: {ctx.plugin_dir}",
                hint="Run Neovim first (or nvim-installer online) to install plugins",
            )
        return state
