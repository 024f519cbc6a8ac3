"""Configuration model for the EIP-1193 provider adapter."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.rpc import PackageInfo

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ProviderConfig(BaseModel):
    """Base configuration for the provider adapter."""

    model_config = ConfigDict(extra="allow")

    # Package identity reported in errors
    package: PackageInfo = Field(
        default_factory=PackageInfo, description="Identity stamped on raised errors"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level
