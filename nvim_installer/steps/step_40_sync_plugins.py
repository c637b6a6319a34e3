from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..errors import CommandError, ErrorKind, InstallerError
from ..lib.editor import sync_plugins

logger = logging.getLogger(__name__)


class SyncPluginsStep:
    step_id = "40_sync_plugins"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        editor = state.get("editor_path") or ctx.editor

        logger.info("Installing plugins (this may take a few minutes)...")
        try:
            sync_plugins(editor, ctx.cfg.sync_command)
        except CommandError as e:
            raise InstallerError(
                ErrorKind.SUBPROCESS,
                f"Plugin sync failed (exit {e.returncode})",
                hint=f"Open {ctx.editor} and run :Lazy to see which plugins failed",
            ) from e

        # The plugin manager reports success per run, not per plugin.
        if not ctx.plugin_dir.is_dir():
            raise InstallerError(
                ErrorKind.VERIFICATION,
                f"Plugin sync finished but {ctx.plugin_dir} does not exist",
            )
        state["plugins_synced"] = True
        return state
