from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="INFO", validation_alias="FITTRACK_LOG_LEVEL")
    log_file: str | None = Field(default=None, validation_alias="FITTRACK_LOG_FILE")
    log_json: bool = Field(default=False, validation_alias="FITTRACK_LOG_JSON")
    storage_path: str = Field(
        default="fittrack-state.json",
        validation_alias="FITTRACK_STORAGE_PATH",
    )
    storage_key: str = Field(default="fittrack-store", validation_alias="FITTRACK_STORAGE_KEY")
    generator_seed: int | None = Field(default=None, validation_alias="FITTRACK_GENERATOR_SEED")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported FITTRACK_LOG_LEVEL: {value}")
        return level

    @field_validator("storage_key")
    @classmethod
    def validate_storage_key(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("FITTRACK_STORAGE_KEY must not be empty")
        return value


settings = Settings()
