"""Tests for backup-by-rename and tree helpers."""

from datetime import datetime

import pytest
from conftest import tree_bytes

from nvim_installer.lib.files import (
    backup_existing,
    copy_tree,
    format_size,
    remove_entries,
    tree_size,
)

NOW = datetime(2024, 3, 5, 14, 7, 9)


class TestBackupExisting:
    def test_renames_with_timestamp_suffix(self, tmp_path):
        cfg = tmp_path / "nvim"
        cfg.mkdir()
        (cfg / "init.lua").write_text("-- mine\n")

        backup = backup_existing(cfg, now=NOW)

        assert backup == tmp_path / "nvim.backup.20240305_140709"
        assert not cfg.exists()
        assert (backup / "init.lua").read_text() == "-- mine\n"

    def test_nothing_to_back_up(self, tmp_path):
        assert backup_existing(tmp_path / "nvim", now=NOW) is None

    def test_same_second_collision_fails_and_keeps_original(self, tmp_path):
        cfg = tmp_path / "nvim"
        cfg.mkdir()
        (cfg / "init.lua").write_text("-- new\n")
        (tmp_path / "nvim.backup.20240305_140709").mkdir()

        with pytest.raises(FileExistsError):
            backup_existing(cfg, now=NOW)

        assert (cfg / "init.lua").read_text() == "-- new\n"


class TestCopyTree:
    def test_excludes_match_at_any_depth(self, tmp_path):
        src = tmp_path / "src"
        (src / ".git").mkdir(parents=True)
        (src / ".git" / "HEAD").write_text("ref\n")
        (src / "lua").mkdir()
        (src / "lua" / "a.lua").write_text("a\n")
        (src / "lua" / "old.tar.gz").write_bytes(b"x")

        copy_tree(src, tmp_path / "dst", exclude=(".git", "*.tar.gz"))

        assert tree_bytes(tmp_path / "dst") == {"lua/a.lua": b"a\n"}

    def test_symlinks_are_preserved(self, tmp_path):
        src = tmp_path / "src"
        src.mkdir()
        (src / "real.lua").write_text("x\n")
        (src / "link.lua").symlink_to("real.lua")

        copy_tree(src, tmp_path / "dst")

        assert (tmp_path / "dst" / "link.lua").is_symlink()

    def test_missing_source_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            copy_tree(tmp_path / "missing", tmp_path / "dst")


class TestRemoveEntries:
    def test_only_top_level_matches_are_removed(self, tmp_path):
        (tmp_path / "nested").mkdir()
        (tmp_path / "nested" / "keep.tar.gz").write_bytes(b"x")
        (tmp_path / "drop.tar.gz").write_bytes(b"x")
        (tmp_path / "readme").mkdir()
        (tmp_path / "readme" / "tags").write_text("t\n")

        removed = remove_entries(tmp_path, ["*.tar.gz", "readme"])

        assert sorted(p.name for p in removed) == ["drop.tar.gz", "readme"]
        assert (tmp_path / "nested" / "keep.tar.gz").exists()
        assert not (tmp_path / "readme").exists()


class TestSizes:
    def test_tree_size_sums_files(self, tmp_path):
        (tmp_path / "a").write_bytes(b"12345")
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "b").write_bytes(b"123")
        assert tree_size(tmp_path) == 8
        assert tree_size(tmp_path / "a") == 5

    @pytest.mark.parametrize(
        "num_bytes,expected",
        [(0, "0B"), (512, "512B"), (2048, "2.0K"), (5 * 1024 * 1024, "5.0M"), (3 * 1024**3, "3.0G")],
    )
    def test_format_size(self, num_bytes, expected):
        assert format_size(num_bytes) == expected
