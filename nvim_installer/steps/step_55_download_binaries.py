from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..lib.net import download_file, pick_fetcher

logger = logging.getLogger(__name__)


class DownloadBinariesStep:
    step_id = "55_download_binaries"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        out = Path(state["output_dir"])
        fetcher = pick_fetcher()
        logger.info(
            "Downloading Neovim %s (%s) with %s...", ctx.cfg.nvim_version, ctx.cfg.nvim_asset, fetcher
        )

        downloads: Dict[str, str] = {}
        for name in (ctx.tarball_name, ctx.appimage_name):
            dest = download_file(ctx.release_asset_url(name), out / name, fetcher=fetcher)
            downloads[name] = str(dest)

        state["downloads"] = downloads
        return state
