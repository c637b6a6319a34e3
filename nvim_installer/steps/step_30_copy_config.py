from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import copy_tree

logger = logging.getLogger(__name__)


class CopyConfigStep:
    step_id = "30_copy_config"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Copying configuration files...")
        copy_tree(ctx.source_dir, ctx.config_dir)
        return state
