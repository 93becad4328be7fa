from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    app_env: str = "dev"
    log_level: str = "INFO"
    port: int = 8000

    processing_language: str = "en"

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if not v:
            return "INFO"
        return str(v).strip().upper()

    @field_validator("processing_language", mode="before")
    @classmethod
    def lower_language(cls, v):
        if not v:
            return "en"
        return str(v).strip().lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
