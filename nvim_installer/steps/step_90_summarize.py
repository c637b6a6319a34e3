from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..lib.archive import list_members
from ..lib.files import format_size, tree_size

logger = logging.getLogger(__name__)


class BundleSummaryStep:
    step_id = "90_bundle_summary"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        bundle = Path(state["bundle_path"])
        name = bundle.name
        logger.info(
            "✓ Bundle created: %s (%s, %d entries)",
            bundle,
            format_size(tree_size(bundle)),
            len(list_members(bundle)),
        )
        logger.info("")
        logger.info("Distribution instructions:")
        logger.info("1. Transfer bundle to target machine")
        logger.info("2. Run: tar -xzf %s -C ~/", name)
        logger.info("3. Start Neovim: %s", ctx.editor)
        return state


class PackageSummaryStep:
    step_id = "90_package_summary"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        out = Path(state["output_dir"])
        entries = sorted(out.iterdir(), key=lambda p: p.name)

        logger.info("✓ Airgapped package ready: %s", out)
        for p in entries:
            logger.info("  %-32s %s", p.name, format_size(tree_size(p)))
        total = tree_size(out)
        logger.info("Total size: %s", format_size(total))
        logger.info("")
        logger.info("Next steps:")
        logger.info("1. Copy %s to the target machine", out)
        logger.info("2. Run: cd ~/%s && ./install.sh", out.name)

        state["package_contents"] = [p.name for p in entries]
        state["package_size"] = total
        return state
