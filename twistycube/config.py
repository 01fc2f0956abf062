from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator, Field


class Settings(BaseSettings):
    """Library settings, overridable through the environment or a .env file"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"  # Ignore unrelated variables from the environment
    )

    log_level: str = Field(default="WARNING", alias="TWISTYCUBE_LOG_LEVEL")
    default_size: int = Field(default=3, alias="TWISTYCUBE_DEFAULT_SIZE")
    log_rotations: bool = Field(default=False, alias="TWISTYCUBE_LOG_ROTATIONS")

    @field_validator("default_size")
    @classmethod
    def check_default_size(cls, v):
        if v < 1:
            raise ValueError("default_size must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v):
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level '{v}'")
        return v


# Global settings instance
settings = Settings()
