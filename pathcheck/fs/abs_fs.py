from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class FileType(str, Enum):
    """文件系统条目类型"""

    REGULAR_FILE = "REGULAR_FILE"  # 普通文件
    DIRECTORY = "DIRECTORY"  # 目录
    SYMLINK = "SYMLINK"  # 未解析的符号链接
    OTHER = "OTHER"  # 设备、管道、套接字等


class ABSFileSystem(ABC):
    """文件系统访问抽象基类, 向路径检查器提供"是否存在"和"条目类型"两种查询."""

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """
        查询路径是否存在 (跟随符号链接, 断开的链接视为不存在).

        Args:
            path: 已规范化的路径

        Returns:
            bool: 存在返回 True

        Raises:
            PathAccessError: 因不存在以外的原因查询失败
        """
        pass

    @abstractmethod
    def file_type(self, path: str) -> FileType | None:
        """
        查询路径对应条目的类型.

        Args:
            path: 已规范化的路径

        Returns:
            FileType | None: 条目类型, 条目在两次查询之间消失时返回 None

        Raises:
            PathAccessError: 因不存在以外的原因查询失败
        """
        pass
