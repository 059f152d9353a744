from __future__ import annotations

import errno
import os
from typing import Any, Dict, Optional

from pathcheck.common.pc_exceptions import PathAccessError
from pathcheck.fs.abs_fs import ABSFileSystem, FileType

# 与 Linux 的 MAXSYMLINKS 保持一致
_MAX_SYMLINK_HOPS = 40


class MemoryFileSystem(ABSFileSystem):
    """基于内存的文件系统实现（用于测试, 不触碰真实磁盘）"""

    def __init__(self, follow_symlinks: bool = False):
        """初始化内存文件系统, 预置根目录 "/" 和当前目录 "." """
        self.follow_symlinks = follow_symlinks
        self._entries: Dict[str, Dict[str, Any]] = {}
        self._denied: set[str] = set()
        self._entries[os.sep] = {"type": FileType.DIRECTORY}
        self._entries[os.curdir] = {"type": FileType.DIRECTORY}

    def add_file(self, path: str) -> None:
        """添加普通文件（父目录自动创建）"""
        self._add(path, FileType.REGULAR_FILE)

    def add_dir(self, path: str) -> None:
        """添加目录"""
        self._add(path, FileType.DIRECTORY)

    def add_symlink(self, path: str, target: str) -> None:
        """添加符号链接, 相对目标按链接所在目录解析"""
        self._add(path, FileType.SYMLINK, target=target)

    def add_special(self, path: str) -> None:
        """添加设备文件、管道等特殊条目"""
        self._add(path, FileType.OTHER)

    def deny(self, path: str) -> None:
        """模拟权限不足: 访问该路径及其子路径时抛出 PathAccessError"""
        self._denied.add(os.path.normpath(path))

    def remove(self, path: str) -> None:
        """删除条目及其所有子条目"""
        path = os.path.normpath(path)
        prefix = path.rstrip(os.sep) + os.sep
        for key in [k for k in self._entries if k == path or k.startswith(prefix)]:
            del self._entries[key]

    def path_exists(self, path: str) -> bool:
        return self._lookup(path, follow_last=True) is not None

    def file_type(self, path: str) -> FileType | None:
        resolved = self._lookup(path, follow_last=self.follow_symlinks)
        if resolved is None:
            return None
        return self._entries[resolved]["type"]

    def _lookup(self, path: str, follow_last: bool) -> Optional[str]:
        normalized = os.path.normpath(path)
        if normalized == os.sep or not path.endswith((os.sep, "/")):
            return self._resolve(normalized, follow_last=follow_last)

        # 末尾带分隔符: 跟随最后一级链接, 且结果必须是目录 (否则 ENOTDIR)
        resolved = self._resolve(normalized, follow_last=True)
        if resolved is None or self._entries[resolved]["type"] is not FileType.DIRECTORY:
            return None
        return resolved

    def _add(self, path: str, file_type: FileType, target: Optional[str] = None) -> None:
        path = os.path.normpath(path)
        parent = os.path.dirname(path)
        if parent and parent != path:
            parent_entry = self._entries.get(parent)
            if parent_entry is None:
                self._add(parent, FileType.DIRECTORY)
            elif parent_entry["type"] is not FileType.DIRECTORY:
                raise ValueError(f"父路径不是目录: {parent}")
        entry: Dict[str, Any] = {"type": file_type}
        if target is not None:
            entry["target"] = target
        self._entries[path] = entry

    def _check_denied(self, path: str) -> None:
        for denied in self._denied:
            if denied == os.curdir and not os.path.isabs(path):
                # "." 覆盖所有相对路径
                raise PathAccessError(path, errno.EACCES, os.strerror(errno.EACCES))
            if path == denied or path.startswith(denied.rstrip(os.sep) + os.sep):
                raise PathAccessError(path, errno.EACCES, os.strerror(errno.EACCES))

    def _resolve(self, path: str, follow_last: bool, hops: int = 0) -> Optional[str]:
        """逐级解析路径中的符号链接, 返回条目的真实键; 不存在返回 None"""
        head, tail = os.path.split(path)
        if head and head != path:
            parent = self._resolve(head, follow_last=True, hops=hops)
            if parent is None:
                return None
            if self._entries[parent]["type"] is not FileType.DIRECTORY:
                # ENOTDIR 按不存在处理
                return None
            path = os.path.join(parent, tail)

        self._check_denied(path)
        entry = self._entries.get(path)
        if entry is None:
            return None
        if entry["type"] is FileType.SYMLINK and follow_last:
            hops += 1
            if hops > _MAX_SYMLINK_HOPS:
                raise PathAccessError(path, errno.ELOOP, os.strerror(errno.ELOOP))
            target = entry["target"]
            if not os.path.isabs(target):
                target = os.path.join(os.path.dirname(path), target)
            return self._resolve(os.path.normpath(target), follow_last=True, hops=hops)
        return path
