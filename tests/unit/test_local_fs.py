"""本地文件系统测试（真实磁盘, 基于 tmp_path）"""

import errno
import os
import sys
from pathlib import Path

import pytest

from pathcheck.checker.path_checker import PathChecker
from pathcheck.common.pc_exceptions import PathAccessError
from pathcheck.config import AccessErrorPolicy, CheckerConfig
from pathcheck.fs.abs_fs import FileType
from pathcheck.fs.local_fs import LocalFileSystem

needs_symlink = pytest.mark.skipif(sys.platform == "win32", reason="需要 POSIX 符号链接")


class TestLocalFileSystem:
    """本地文件系统测试类"""

    def test_scenarios(self, data_dir: Path):
        """测试 ./data 目录下的典型场景"""
        checker = PathChecker(LocalFileSystem())

        assert checker.is_file("./data/sample.txt") is True
        assert checker.is_file("./data") is False
        assert checker.is_file("./data/missing.txt") is False
        assert checker.is_file("./data/./sample.txt") is True

    def test_absolute_path(self, data_dir: Path):
        """测试绝对路径"""
        checker = PathChecker(LocalFileSystem())
        assert checker.is_file(data_dir / "sample.txt") is True
        assert checker.is_file(str(data_dir)) is False

    def test_empty_string(self, data_dir: Path):
        """测试空字符串返回 False"""
        assert PathChecker(LocalFileSystem()).is_file("") is False

    def test_file_type(self, data_dir: Path):
        """测试类型查询"""
        fs = LocalFileSystem()
        assert fs.file_type("data/sample.txt") is FileType.REGULAR_FILE
        assert fs.file_type("data") is FileType.DIRECTORY
        assert fs.file_type("data/missing.txt") is None

    def test_not_a_directory(self, data_dir: Path):
        """测试把文件当作目录时视为不存在"""
        fs = LocalFileSystem()
        assert fs.path_exists("data/sample.txt/child") is False
        assert fs.file_type("data/sample.txt/child") is None

    def test_trailing_separator(self, data_dir: Path):
        """测试末尾带分隔符的文件路径视为不存在, 目录路径返回 False"""
        checker = PathChecker(LocalFileSystem())

        assert checker.is_file("./data/sample.txt/") is False
        assert checker.file_type("data/sample.txt/") is None
        assert checker.is_file("data/") is False
        assert checker.file_type("data/") is FileType.DIRECTORY

    def test_entry_vanishes_before_type_probe(self, data_dir: Path, monkeypatch: pytest.MonkeyPatch):
        """测试类型检查时条目已被删除, 按不存在处理"""

        def vanished(path, *args, **kwargs):
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

        monkeypatch.setattr(os, "lstat", vanished)
        checker = PathChecker(LocalFileSystem())

        assert checker.file_type("data/sample.txt") is None
        assert checker.is_file("data/sample.txt") is False

    def test_null_byte(self, data_dir: Path):
        """测试包含空字符的路径视为不存在"""
        fs = LocalFileSystem()
        assert fs.path_exists("data/sample\x00.txt") is False
        assert PathChecker(fs).is_file("data/sample\x00.txt") is False

    @needs_symlink
    def test_broken_symlink(self, data_dir: Path):
        """测试断开的符号链接返回 False"""
        os.symlink("nowhere.txt", data_dir / "dangling")
        checker = PathChecker(LocalFileSystem())

        assert checker.is_file("./data/dangling") is False
        assert checker.is_file("./data/dangling/sample.txt") is False

    @needs_symlink
    def test_symlink_to_file(self, data_dir: Path):
        """测试指向文件的符号链接默认返回 False, 跟随时返回 True"""
        os.symlink("sample.txt", data_dir / "link.txt")

        assert LocalFileSystem().file_type("data/link.txt") is FileType.SYMLINK
        assert PathChecker(LocalFileSystem()).is_file("data/link.txt") is False
        assert PathChecker(LocalFileSystem(follow_symlinks=True)).is_file("data/link.txt") is True

    @needs_symlink
    def test_symlink_directory_component(self, data_dir: Path):
        """测试中间目录为符号链接时仍能判断目标文件"""
        os.symlink("data", data_dir.parent / "alias")
        assert PathChecker(LocalFileSystem()).is_file("alias/sample.txt") is True

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="需要 os.mkfifo")
    def test_fifo(self, data_dir: Path):
        """测试命名管道返回 False"""
        os.mkfifo(data_dir / "pipe")

        assert LocalFileSystem().file_type("data/pipe") is FileType.OTHER
        assert PathChecker(LocalFileSystem()).is_file("data/pipe") is False

    def test_permission_error(self, data_dir: Path, monkeypatch: pytest.MonkeyPatch):
        """测试权限错误转换为 PathAccessError 并按策略处理"""

        def denied(path, *args, **kwargs):
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)

        monkeypatch.setattr(os, "stat", denied)
        fs = LocalFileSystem()

        with pytest.raises(PathAccessError) as exc_info:
            fs.path_exists("data/sample.txt")
        assert exc_info.value.errno == errno.EACCES
        assert "data/sample.txt" in str(exc_info.value)

        assert PathChecker(fs).is_file("data/sample.txt") is False
        raising = PathChecker(fs, CheckerConfig(access_error_policy=AccessErrorPolicy.RAISE))
        with pytest.raises(PathAccessError):
            raising.is_file("data/sample.txt")

    @needs_symlink
    def test_symlink_loop(self, data_dir: Path):
        """测试符号链接循环按访问失败处理"""
        os.symlink("b", data_dir / "a")
        os.symlink("a", data_dir / "b")
        fs = LocalFileSystem()

        with pytest.raises(PathAccessError) as exc_info:
            fs.path_exists("data/a")
        assert exc_info.value.errno == errno.ELOOP
        assert PathChecker(fs).is_file("data/a") is False
