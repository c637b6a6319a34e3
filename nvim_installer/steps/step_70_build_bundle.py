from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..lib.archive import create_tarball
from ..lib.files import copy_tree, remove_entries

logger = logging.getLogger(__name__)

# Never bundle VCS metadata, earlier bundles or the installer itself.
BUNDLE_EXCLUDES = (".git", "*.tar.gz", "install.sh", "installer.yaml")


class BuildBundleStep:
    """Snapshot config + plugins into a home-rooted archive.

    Plain `bundle` mode drops the archive next to the tool; the airgapped
    variant writes it into the package dir and strips plugin-manager
    metadata that is only useful online.
    """

    step_id = "70_build_bundle"

    def __init__(self, *, airgapped: bool = False) -> None:
        self.airgapped = airgapped

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        dest_dir = Path(state["output_dir"]) if self.airgapped else ctx.tool_dir
        config_rel = Path(".config") / ctx.editor
        plugins_rel = Path(".local") / "share" / ctx.editor / ctx.cfg.plugin_manager_dir

        logger.info("Creating offline bundle...")
        staging = Path(tempfile.mkdtemp(prefix="nvim-bundle-"))
        try:
            logger.info("Copying config files...")
            copy_tree(ctx.config_dir, staging / config_rel, exclude=BUNDLE_EXCLUDES)

            logger.info("Copying plugins...")
            copy_tree(ctx.plugin_dir, staging / plugins_rel)
            if self.airgapped:
                remove_entries(staging / plugins_rel, ctx.cfg.airgap_strip_plugin_entries)

            logger.info("Creating archive...")
            built = create_tarball(staging / ctx.cfg.bundle_name, staging, [".config", ".local"])

            dest_dir.mkdir(parents=True, exist_ok=True)
            dest = dest_dir / ctx.cfg.bundle_name
            shutil.move(str(built), str(dest))
        finally:
            shutil.rmtree(staging, ignore_errors=True)

        state["bundle_path"] = str(dest)
        return state
