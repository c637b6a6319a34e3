from __future__ import annotations

import logging
from typing import Any, Dict

from ..context import InstallContext
from ..lib.files import backup_existing

logger = logging.getLogger(__name__)


class BackupConfigStep:
    step_id = "20_backup_config"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        backup = backup_existing(ctx.config_dir)
        state["config_backup"] = str(backup) if backup else None
        return state
