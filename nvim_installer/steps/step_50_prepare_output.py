from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import backup_existing

logger = logging.getLogger(__name__)


class PrepareOutputStep:
    step_id = "50_prepare_output"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        out = ctx.airgap_dir
        # A stale package would mix old and new artifacts.
        backup = backup_existing(out)
        out.mkdir(parents=True)

        state["output_dir"] = str(out)
        state["output_backup"] = str(backup) if backup else None
        state["generated_at"] = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        logger.info("Building airgapped package in %s", out)
        return state
