from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import remove_entries

logger = logging.getLogger(__name__)

# Build artifacts that must never end up in a runtime config directory.
INSTALLER_ARTIFACTS = ("install.sh", "installer.yaml", "*.tar.gz")


class StripArtifactsStep:
    step_id = "35_strip_artifacts"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        removed = remove_entries(ctx.config_dir, INSTALLER_ARTIFACTS)
        if removed:
            logger.info("Removed installer artifacts: %s", ", ".join(p.name for p in removed))
        return state
