from __future__ import annotations

import logging
import tarfile
import tempfile
from pathlib import Path
from typing import Any, Dict

from ..context import InstallContext
from ..errors import ErrorKind, InstallerError
from ..lib.archive import extract_tarball
from ..lib.editor import choose_binary
from ..lib.files import format_size, make_executable
from ..lib.net import verify_download

logger = logging.getLogger(__name__)


class VerifyDownloadsStep:
    step_id = "60_verify_downloads"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        out = Path(state["output_dir"])
        tarball = out / ctx.tarball_name
        appimage = out / ctx.appimage_name

        for p in (tarball, appimage):
            size = verify_download(p)
            logger.info("Downloaded %s (%s)", p.name, format_size(size))

        make_executable(appimage)
        state["build_host_binary"] = None

        with tempfile.TemporaryDirectory(prefix="nvim-probe-") as tmp:
            try:
                extract_tarball(tarball, Path(tmp))
            except tarfile.TarError as e:
                raise InstallerError(
                    ErrorKind.DOWNLOAD_INTEGRITY,
                    f"{tarball.name} is not a valid archive: {e}",
                    hint="Delete the package directory and run: nvim-installer airgapped",
                ) from e

            if not ctx.cfg.airgap_probe_downloads:
                logger.info("Skipping build-host run of the downloaded binaries (airgap.probe_downloads: false)")
                return state

            # Informational: which build would the target-side probe pick here?
            logger.warning(
                "Running the downloaded binaries with --version on this host "
                "(no checksum verification; set airgap.probe_downloads: false to skip)"
            )
            standard = Path(tmp) / ctx.cfg.nvim_asset / "bin" / ctx.editor
            chosen = choose_binary([standard, appimage])

        if chosen is None:
            logger.warning("Neither build runs on this host; the target machine decides at install time")
        else:
            kind = "standard" if chosen == standard else "appimage"
            logger.info("On this host the installer would pick the %s build", kind)
            state["build_host_binary"] = kind
        return state
