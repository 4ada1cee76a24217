from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseSettings):
    verbosity_level: str = Field(default="ERROR")

    model_config = SettingsConfigDict(env_prefix="CHARTWISE_LOGGING_")


class ScatterConfig(BaseSettings):
    """Pixel constants and size-scale fallbacks used by scatter charts."""

    base_pixel_size: float = Field(default=10.0, gt=0)
    min_symbol_size: float = Field(default=3.0, ge=0)
    max_symbol_size: float = Field(default=64.0, gt=0)
    # Scale used when no size channel is bound or no numeric size cell exists
    default_size_min: float = Field(default=0.0)
    default_size_max: float = Field(default=100.0)

    model_config = SettingsConfigDict(env_prefix="CHARTWISE_SCATTER_")

    @model_validator(mode="after")
    def check_bounds(self) -> "ScatterConfig":
        if self.min_symbol_size > self.max_symbol_size:
            raise ValueError("min_symbol_size must not exceed max_symbol_size")
        if self.default_size_min > self.default_size_max:
            raise ValueError("default_size_min must not exceed default_size_max")
        return self


class Settings(BaseSettings):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scatter: ScatterConfig = Field(default_factory=ScatterConfig)

    model_config = SettingsConfigDict(env_prefix="CHARTWISE_")
