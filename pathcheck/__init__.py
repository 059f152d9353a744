"""pathcheck - 判断路径是否指向存在的普通文件"""

import os
from functools import lru_cache

from pathcheck.checker.path_checker import PathChecker
from pathcheck.common.pc_exceptions import (
    PathAccessError,
    PathCheckConfigError,
    PathCheckError,
)
from pathcheck.config import AccessErrorPolicy, CheckerConfig, PathCheckConfig
from pathcheck.containers import AppContainer
from pathcheck.fs import ABSFileSystem, FileType, LocalFileSystem, MemoryFileSystem

__all__ = [
    "ABSFileSystem",
    "AccessErrorPolicy",
    "AppContainer",
    "CheckerConfig",
    "FileType",
    "LocalFileSystem",
    "MemoryFileSystem",
    "PathAccessError",
    "PathCheckConfig",
    "PathCheckConfigError",
    "PathCheckError",
    "PathChecker",
    "get_default_checker",
    "is_file",
]


@lru_cache(maxsize=None)
def get_default_checker() -> PathChecker:
    """按环境配置构建默认检查器（首次调用时读取配置并初始化日志）"""
    container = AppContainer()
    container.logger()
    return container.path_checker()


def is_file(path: str | os.PathLike[str]) -> bool:
    """判断路径是否指向存在的普通文件, 使用默认检查器"""
    return get_default_checker().is_file(path)
