from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import make_executable
from ..lib.templates import render_template

logger = logging.getLogger(__name__)

INSTALLER_NAME = "install.sh"
TARGET_PLATFORM = "Linux/x86_64"


def template_values(ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, str]:
    return {
        "EDITOR": ctx.editor,
        "PLUGIN_MANAGER_DIR": ctx.cfg.plugin_manager_dir,
        "NVIM_VERSION": ctx.cfg.nvim_version,
        "TARGET_PLATFORM": TARGET_PLATFORM,
        "RELEASE_URL": ctx.release_asset_url(""),
        "GENERATED_AT": str(state.get("generated_at") or ""),
        "BUNDLE_NAME": ctx.cfg.bundle_name,
        "TARBALL_NAME": ctx.tarball_name,
        "TARBALL_ROOT": ctx.cfg.nvim_asset,
        "APPIMAGE_NAME": ctx.appimage_name,
        "PACKAGE_DIR_NAME": ctx.airgap_dir.name,
    }


class WriteInstallerStep:
    step_id = "75_write_installer"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        script = Path(state["output_dir"]) / INSTALLER_NAME
        script.write_text(
            render_template("install-airgapped.sh", template_values(ctx, state)),
            encoding="utf-8",
        )
        make_executable(script)
        logger.info("Wrote %s", script)
        return state
