import os

_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep, "/") if sep)


def normalize_path(file_path: str | os.PathLike[str]) -> str:
    """
    按词法规范化路径（合并分隔符, 解析 . 和 ..）, 不访问文件系统

    末尾的分隔符保留不变, "a/file.txt/" 要求 file.txt 是目录.
    """
    fp = os.fspath(file_path)
    if not isinstance(fp, str):
        raise TypeError(f"路径必须是 str 或 os.PathLike[str], 实际为 {type(file_path).__name__}")
    normalized = os.path.normpath(fp)
    if fp.endswith(_SEPARATORS) and not normalized.endswith(_SEPARATORS):
        normalized += os.sep
    return normalized
