from pathcheck.common.pc_exceptions.pc_exceptions import (
    PathAccessError,
    PathCheckConfigError,
    PathCheckError,
)

__all__ = [
    "PathCheckError",
    "PathAccessError",
    "PathCheckConfigError",
]
