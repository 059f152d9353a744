from pydantic import Field
from pydantic_settings import SettingsConfigDict

from pathcheck.config.checker_config import CheckerConfig
from pathcheck.config.log_config import LogConfig
from pathcheck.config.pc_base_settings import PCBaseSettings


class PathCheckConfig(PCBaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="PATHCHECK_",
    )

    checker: CheckerConfig = Field(default_factory=CheckerConfig, description="路径检查配置")
    log: LogConfig = Field(default_factory=LogConfig, description="日志配置")
