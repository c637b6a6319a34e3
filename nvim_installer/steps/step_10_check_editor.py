from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..errors import ErrorKind, InstallerError
from ..lib.editor import editor_version, find_editor, probe_binary

logger = logging.getLogger(__name__)

INSTALL_HINT = (
    "Please install it first:\n"
    "  Ubuntu/Debian: sudo apt install neovim\n"
    "  macOS: brew install neovim\n"
    "  RHEL/CentOS: sudo yum install neovim"
)


class CheckEditorStep:
    step_id = "10_check_editor"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        path = find_editor(ctx.editor)
        if not path:
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"{ctx.editor} is not installed (not found on PATH)",
                hint=INSTALL_HINT,
            )
        if not probe_binary(path):
            raise InstallerError(
                ErrorKind.MISSING_PREREQUISITE,
                f"{path} was found but does not run",
                hint=INSTALL_HINT,
            )

        state["editor_path"] = path
        logger.info("Neovim found: %s", editor_version(path) or path)
        return state
