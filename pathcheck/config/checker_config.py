from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathcheck.common.pc_exceptions import PathCheckConfigError


class AccessErrorPolicy(str, Enum):
    """访问失败（权限不足、I/O 错误）时的处理策略"""

    COLLAPSE = "collapse"  # 记录告警并视为"不是文件"
    RAISE = "raise"  # 抛出 PathAccessError


class CheckerConfig(BaseModel):

    model_config = ConfigDict(
        extra="ignore",
    )

    access_error_policy: AccessErrorPolicy = Field(
        default=AccessErrorPolicy.COLLAPSE, description="访问失败时的处理策略")
    follow_symlinks: bool = Field(
        default=False, description="类型检查时是否跟随最后一级符号链接")

    @field_validator('access_error_policy', mode='before')
    def validate_access_error_policy(cls, v):
        if isinstance(v, AccessErrorPolicy):
            return v
        if isinstance(v, str):
            try:
                return AccessErrorPolicy(v.strip().lower())
            except ValueError:
                pass
        raise PathCheckConfigError(
            f"access_error_policy 必须是 {[p.value for p in AccessErrorPolicy]} 之一, 实际为 {v!r}")
