"""路径检查器 - 判断路径是否指向一个当前存在的普通文件"""

import logging
import os
from typing import Dict, Iterable, Optional

from pathcheck.common.pc_exceptions import PathAccessError
from pathcheck.config import AccessErrorPolicy, CheckerConfig
from pathcheck.fs.abs_fs import ABSFileSystem, FileType
from pathcheck.utils.file_op import normalize_path

logger = logging.getLogger(__name__)


class PathChecker:
    """路径检查器: 规范化 -> 存在性检查 -> 类型检查 -> bool"""

    def __init__(self, filesystem: ABSFileSystem, config: Optional[CheckerConfig] = None):
        """
        初始化路径检查器

        Args:
            filesystem: 文件系统访问对象, 测试中可替换为 MemoryFileSystem
            config: 检查器配置, 为空时使用默认配置
        """
        self.filesystem = filesystem
        self.config = config or CheckerConfig()

    def normalize(self, path: str | os.PathLike[str]) -> str:
        """规范化路径（纯词法, 不访问文件系统）"""
        return normalize_path(path)

    def is_file(self, path: str | os.PathLike[str]) -> bool:
        """
        判断路径是否指向存在的普通文件

        不存在、目录、符号链接（默认不跟随）以及特殊文件均返回 False,
        不会因为"文件不存在"而抛出异常.

        Args:
            path: 待检查的路径

        Returns:
            bool: 是普通文件返回 True

        Raises:
            TypeError: path 不是字符串类路径
            PathAccessError: 访问失败且策略为 raise
        """
        return self.file_type(path) is FileType.REGULAR_FILE

    def file_type(self, path: str | os.PathLike[str]) -> Optional[FileType]:
        """
        查询路径对应条目的类型, 不存在时返回 None

        Raises:
            TypeError: path 不是字符串类路径
            PathAccessError: 访问失败且策略为 raise
        """
        fp = self.normalize(path)
        if not os.fspath(path):
            logger.debug("空路径, 视为不存在")
            return None

        try:
            if not self.filesystem.path_exists(fp):
                logger.debug(f"路径不存在: {fp}")
                return None
            file_type = self.filesystem.file_type(fp)
        except PathAccessError as e:
            if self.config.access_error_policy is AccessErrorPolicy.RAISE:
                raise
            logger.warning(f"访问路径失败, 按不存在处理: {e.message}")
            return None

        logger.debug(f"路径类型: {fp} -> {file_type.value if file_type else None}")
        return file_type

    def check_many(self, paths: Iterable[str | os.PathLike[str]]) -> Dict[str, bool]:
        """
        批量检查路径, 按输入顺序返回 {原始路径: 是否为普通文件}

        Args:
            paths: 待检查的路径集合
        """
        return {os.fspath(path): self.is_file(path) for path in paths}
