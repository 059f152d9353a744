from __future__ import annotations

import logging
import os
import stat

from pathcheck.common.pc_exceptions import PathAccessError
from pathcheck.fs.abs_fs import ABSFileSystem, FileType

logger = logging.getLogger(__name__)

# 这些错误表示路径不存在, 而不是访问失败
_ABSENT_ERRORS = (FileNotFoundError, NotADirectoryError)


def _classify(mode: int) -> FileType:
    if stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    return FileType.OTHER


class LocalFileSystem(ABSFileSystem):
    """基于本机文件系统的实现, 使用 os.stat / os.lstat."""

    def __init__(self, follow_symlinks: bool = False):
        """
        初始化本地文件系统.

        Args:
            follow_symlinks: 类型查询是否跟随最后一级符号链接, 默认不跟随 (lstat)
        """
        self.follow_symlinks = follow_symlinks

    def path_exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except _ABSENT_ERRORS:
            return False
        except ValueError:
            # 例如路径中包含空字符
            logger.debug(f"非法路径, 视为不存在: {path!r}")
            return False
        except OSError as e:
            raise PathAccessError(path, e.errno, e.strerror) from e
        return True

    def file_type(self, path: str) -> FileType | None:
        try:
            st = os.stat(path) if self.follow_symlinks else os.lstat(path)
        except _ABSENT_ERRORS:
            return None
        except ValueError:
            return None
        except OSError as e:
            raise PathAccessError(path, e.errno, e.strerror) from e
        return _classify(st.st_mode)
