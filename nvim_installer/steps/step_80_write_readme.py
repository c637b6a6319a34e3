from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..lib.templates import render_template
from .step_75_write_installer import template_values

logger = logging.getLogger(__name__)

README_NAME = "README.txt"


class WriteReadmeStep:
    step_id = "80_write_readme"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        readme = Path(state["output_dir"]) / README_NAME
        readme.write_text(
            render_template("README.airgapped.txt", template_values(ctx, state)),
            encoding="utf-8",
        )
        logger.info("Wrote %s", readme)
        return state
