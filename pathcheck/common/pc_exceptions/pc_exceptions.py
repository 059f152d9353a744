"""路径检查自定义异常类"""

__all__ = [
    "PathCheckError",
    "PathAccessError",
    "PathCheckConfigError",
]


class PathCheckError(Exception):
    """路径检查基础异常类"""

    def __init__(self, message: str, path: str | None = None):
        """
        初始化路径检查异常

        Args:
            message: 错误消息
            path: 出错的路径（可选）
        """
        super().__init__(message)
        self.message = message
        self.path = path


class PathAccessError(PathCheckError):
    """路径访问失败异常（权限不足、I/O 错误、符号链接循环等）"""

    def __init__(self, path: str, errno: int | None = None, strerror: str | None = None):
        self.errno = errno
        self.strerror = strerror
        detail = strerror or "未知错误"
        if errno is not None:
            detail = f"[Errno {errno}] {detail}"
        super().__init__(f"无法访问路径 {path!r}: {detail}", path)


class PathCheckConfigError(PathCheckError, ValueError):
    """配置错误异常（继承 ValueError，供 pydantic 校验器抛出）"""

    def __init__(self, message: str = "配置无效", path: str | None = None):
        super().__init__(message, path)
