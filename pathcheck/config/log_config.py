import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogConfig(BaseModel):

    model_config = ConfigDict(
        extra="ignore",
    )

    level: str = Field(default="INFO", description="日志级别")
    log_file: Path | None = Field(default=None, description="日志文件路径, 为空时不写文件")
    max_bytes: int = Field(default=10 * 1024 * 1024, description="单个日志文件大小上限")
    backup_count: int = Field(default=5, description="保留的日志备份数量")
    console: bool = Field(default=False, description="是否输出到控制台")

    @field_validator('level')
    def validate_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"未知的日志级别: {v}")
        return level
