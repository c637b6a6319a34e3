"""
Pytest configuration and fixtures.
"""

import os
import shutil
from pathlib import Path
from typing import Dict

import pytest

from nvim_installer.context import InstallContext
from nvim_installer.install_config import InstallConfig
from nvim_installer.lib.archive import create_tarball


def write_script(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(0o755)
    return path


def tree_bytes(root: Path) -> Dict[str, bytes]:
    """Relative path -> file contents, for byte-for-byte tree comparison."""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    monkeypatch.delenv("NVIM_INSTALLER_CONFIG", raising=False)
    return h


@pytest.fixture
def tool_dir(tmp_path) -> Path:
    """A checkout of the config repo: nvim/ source tree next to the tool."""
    tool = tmp_path / "tool"
    src = tool / "nvim"
    (src / "lua" / "plugins").mkdir(parents=True)
    (src / "init.lua").write_text('vim.g.mapleader = " "\n')
    (src / "lua" / "plugins" / "oil.lua").write_text('return { "stevearc/oil.nvim" }\n')
    return tool


@pytest.fixture
def bin_dir(tmp_path, monkeypatch) -> Path:
    b = tmp_path / "bin"
    b.mkdir()
    monkeypatch.setenv("PATH", f"{b}{os.pathsep}{os.environ.get('PATH', '')}")
    return b


@pytest.fixture
def fake_nvim(bin_dir, home) -> Path:
    """nvim stand-in: answers --version, records every call, and 'syncs'
    plugins by creating the lazy.nvim directory. Returns the call log."""
    log = bin_dir / "nvim-calls.log"
    write_script(
        bin_dir / "nvim",
        f"""echo "$@" >> "{log}"
if [ "$1" = "--version" ]; then
    echo "NVIM v0.10.4"
    exit 0
fi
mkdir -p "$HOME/.local/share/nvim/lazy/lazy.nvim"
exit 0
""",
    )
    return log


@pytest.fixture
def ctx(home, tool_dir) -> InstallContext:
    return InstallContext.from_config(InstallConfig(), home=home, tool_dir=tool_dir)


@pytest.fixture
def installed(ctx) -> InstallContext:
    """A machine where `online` already ran: config + plugins present."""
    cfg = ctx.config_dir
    (cfg / "lua" / "plugins").mkdir(parents=True)
    (cfg / "init.lua").write_text("-- init\n")
    (cfg / "lua" / "plugins" / "oil.lua").write_text('return { "stevearc/oil.nvim" }\n')
    (cfg / "install.sh").write_text("#!/bin/sh\n")
    (cfg / "old-bundle.tar.gz").write_bytes(b"stale archive")
    (cfg / ".git").mkdir()
    (cfg / ".git" / "HEAD").write_text("ref: refs/heads/main\n")

    plugin = ctx.plugin_dir / "oil.nvim" / "lua"
    plugin.mkdir(parents=True)
    (plugin / "oil.lua").write_text("return {}\n")
    (ctx.plugin_dir / "lazy.nvim").mkdir()
    (ctx.plugin_dir / "lazy.nvim" / "init.lua").write_text("-- lazy\n")
    (ctx.plugin_dir / "readme" / "doc").mkdir(parents=True)
    (ctx.plugin_dir / "readme" / "doc" / "tags").write_text("oil\toil.txt\n")
    return ctx


@pytest.fixture
def fake_release(tmp_path) -> Dict[str, Path]:
    """Release assets: a standard build that cannot run here and a working AppImage."""
    root = tmp_path / "release"
    write_script(root / "nvim-linux-x86_64" / "bin" / "nvim", "exit 1\n")

    assets = tmp_path / "assets"
    tarball = create_tarball(assets / "nvim-linux-x86_64.tar.gz", root, ["nvim-linux-x86_64"])
    appimage = assets / "nvim-linux-x86_64.appimage"
    # Not executable on purpose: the build has to mark it runnable.
    appimage.write_text('#!/bin/sh\necho "NVIM v0.10.4"\n')
    return {tarball.name: tarball, appimage.name: appimage}


@pytest.fixture
def fake_download(monkeypatch, fake_release):
    """Replace network downloads with copies of fake_release; returns requested URLs."""
    calls = []

    def _download(url, dest, *, fetcher):
        calls.append(url)
        shutil.copyfile(fake_release[url.rsplit("/", 1)[-1]], dest)
        return dest

    monkeypatch.setattr("nvim_installer.steps.step_55_download_binaries.download_file", _download)
    monkeypatch.setattr("nvim_installer.steps.step_55_download_binaries.pick_fetcher", lambda: "curl")
    return calls
