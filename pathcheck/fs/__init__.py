from pathcheck.fs.abs_fs import ABSFileSystem, FileType
from pathcheck.fs.local_fs import LocalFileSystem
from pathcheck.fs.memory_fs import MemoryFileSystem

__all__ = [
    "ABSFileSystem",
    "FileType",
    "LocalFileSystem",
    "MemoryFileSystem",
]
