from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .context import InstallContext, default_tool_dir
from .errors import InstallerError
from .install_config import find_config_path, load_install_config
from .logging_utils import configure_logging
from .pipeline import Step, run_pipeline
from .steps import (
    BackupConfigStep,
    BuildBundleStep,
    BundleSummaryStep,
    CheckEditorStep,
    CopyConfigStep,
    DownloadBinariesStep,
    ExtractBundleStep,
    PackageSummaryStep,
    PrepareOutputStep,
    RequireBundleStep,
    RequireInstalledStep,
    RequireSourceStep,
    StripArtifactsStep,
    SyncPluginsStep,
    VerifyDownloadsStep,
    WriteInstallerStep,
    WriteReadmeStep,
)

logger = logging.getLogger(__name__)

COMMANDS = {
    "online": "Install config and download plugins (requires internet)",
    "offline": "Install from bundled archive (no internet required)",
    "bundle": "Create offline bundle for distribution",
    "airgapped": "Create a full offline package (Neovim binaries + bundle + installer)",
}

EXAMPLES = """\
Examples:
  # On your machine (create bundle)
  nvim-installer bundle

  # On colleague's machine (with internet)
  nvim-installer online

  # On EC2 instance (no internet)
  scp nvim-bundle.tar.gz ec2-instance:~/
  ssh ec2-instance "tar -xzf nvim-bundle.tar.gz -C ~/"

  # Machine without internet and without Neovim
  nvim-installer airgapped
  scp -r ~/nvim-airgapped target:~/ && ssh target "cd nvim-airgapped && ./install.sh"
"""


def build_steps(command: str) -> List[Step]:
    if command == "online":
        return [
            CheckEditorStep(),
            RequireSourceStep(),
            BackupConfigStep(),
            CopyConfigStep(),
            StripArtifactsStep(),
            SyncPluginsStep(),
        ]
    if command == "offline":
        return [
            CheckEditorStep(),
            RequireBundleStep(),
            BackupConfigStep(),
            ExtractBundleStep(),
        ]
    if command == "bundle":
        return [
            CheckEditorStep(),
            RequireInstalledStep(),
            BuildBundleStep(),
            BundleSummaryStep(),
        ]
    if command == "airgapped":
        return [
            CheckEditorStep(),
            RequireInstalledStep(),
            PrepareOutputStep(),
            DownloadBinariesStep(),
            VerifyDownloadsStep(),
            BuildBundleStep(airgapped=True),
            WriteInstallerStep(),
            WriteReadmeStep(),
            PackageSummaryStep(),
        ]
    raise ValueError(f"Unknown command: {command}")


def load_context(*, tool_dir: Optional[Path] = None, home: Optional[Path] = None) -> InstallContext:
    root = tool_dir or default_tool_dir()
    cfg = load_install_config(find_config_path(root))
    return InstallContext.from_config(cfg, home=home, tool_dir=tool_dir)


def run(command: str, *, ctx: InstallContext) -> Dict[str, Any]:
    """Run one installer command to completion or first failure."""

    logger.info("Running %s mode...", command)
    result = run_pipeline(ctx=ctx, steps=build_steps(command))
    if command in {"online", "offline"}:
        logger.info("✓ Installation complete!")
        logger.info("Start Neovim with: %s", ctx.editor)
    return result.state


def _parser() -> argparse.ArgumentParser:
    commands = "\n".join(f"  {name:<10} {desc}" for name, desc in COMMANDS.items())
    return argparse.ArgumentParser(
        prog="nvim-installer",
        description="Neovim Configuration Installer",
        usage="%(prog)s {" + ",".join(COMMANDS) + "}",
        epilog=f"Commands:\n{commands}\n\n{EXAMPLES}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )


def main(argv: Optional[list[str]] = None) -> int:
    p = _parser()
    p.add_argument("command", nargs="?", choices=list(COMMANDS), help=argparse.SUPPRESS)
    args = p.parse_args(argv)

    if args.command is None:
        p.print_help(sys.stderr)
        return 2

    try:
        ctx = load_context()
        configure_logging(log_path=ctx.cfg.log_path)
        if ctx.cfg.source:
            logger.info("Using config %s", ctx.cfg.source)
        run(args.command, ctx=ctx)
    except InstallerError as e:
        configure_logging()
        logger.error("%s", e.message)
        if e.hint:
            for line in e.hint.splitlines():
                logger.error("%s", line)
        logger.debug("Failed in step %s (%s)", e.step_id, e.kind.value)
        return 1
    return 0
