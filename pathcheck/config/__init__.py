from pathcheck.config.checker_config import AccessErrorPolicy, CheckerConfig
from pathcheck.config.log_config import LogConfig
from pathcheck.config.pc_base_settings import PCBaseSettings
from pathcheck.config.pc_config import PathCheckConfig

__all__ = [
    "AccessErrorPolicy",
    "CheckerConfig",
    "LogConfig",
    "PCBaseSettings",
    "PathCheckConfig",
]
