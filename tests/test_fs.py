"""Folder size estimator tests."""

import os
import sys

import pytest

from jps_packager.lib.fs import LARGE_FOLDER_THRESHOLD, folder_size, format_gigabytes, is_large_folder


def write(path, size):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


class TestFolderSize:
    def test_sums_nested_files(self, tmp_path):
        write(tmp_path / "a.bin", 100)
        write(tmp_path / "sub" / "b.bin", 200)
        write(tmp_path / "sub" / "deeper" / "c.bin", 300)

        assert folder_size(tmp_path) == 600

    def test_empty_directories_count_nothing(self, tmp_path):
        (tmp_path / "empty" / "nested").mkdir(parents=True)
        assert folder_size(tmp_path) == 0

    def test_missing_path_is_zero(self, tmp_path):
        assert folder_size(tmp_path / "nope") == 0

    def test_file_path_is_zero(self, tmp_path):
        write(tmp_path / "file.bin", 50)
        assert folder_size(tmp_path / "file.bin") == 0

    def test_accepts_str(self, tmp_path):
        write(tmp_path / "a.bin", 10)
        assert folder_size(str(tmp_path)) == 10


class TestLargeFolderGate:
    def test_threshold_is_decimal_gigabyte(self):
        assert LARGE_FOLDER_THRESHOLD == 10**9

    @pytest.mark.parametrize(
        "size,expected",
        [(0, False), (10**9, False), (10**9 + 1, True), (2**30, True)],
    )
    def test_is_large_folder(self, size, expected):
        assert is_large_folder(size) is expected

    def test_format_gigabytes(self):
        assert format_gigabytes(1_234_567_890) == "1.23 GB"
        assert format_gigabytes(0) == "0.00 GB"


@pytest.mark.skipif(not hasattr(os, "symlink") or sys.platform == "win32", reason="needs symlinks")
class TestSymlinks:
    def test_file_symlink_not_counted(self, tmp_path):
        outside = tmp_path / "outside.bin"
        write(outside, 1000)
        tree = tmp_path / "tree"
        write(tree / "real.bin", 100)
        os.symlink(outside, tree / "link.bin")

        assert folder_size(tree) == 100

    def test_dir_symlink_not_followed(self, tmp_path):
        outside = tmp_path / "outside"
        write(outside / "big.bin", 1000)
        tree = tmp_path / "tree"
        write(tree / "real.bin", 100)
        os.symlink(outside, tree / "linked_dir")

        assert folder_size(tree) == 100

    def test_dangling_symlink_skipped(self, tmp_path):
        tree = tmp_path / "tree"
        write(tree / "real.bin", 7)
        os.symlink(tmp_path / "gone", tree / "dangling")

        assert folder_size(tree) == 7
