from __future__ import annotations

import logging
import tarfile
from typing import Any, Dict

from ..context import InstallContext
from ..errors import ErrorKind, InstallerError
from ..lib.archive import extract_tarball

logger = logging.getLogger(__name__)


class ExtractBundleStep:
    step_id = "45_extract_bundle"

    def run(self, ctx: InstallContext, state: Dict[str, Any]) -> Dict[str, Any]:
        logger.info("Extracting bundle...")
        try:
            extract_tarball(ctx.bundle_path, ctx.home)
        except tarfile.TarError as e:
            raise InstallerError(
                ErrorKind.ARCHIVE,
                f"Cannot extract {ctx.bundle_path}: {e}",
                hint="Rebuild it with: nvim-installer bundle",
            ) from e
        return state
