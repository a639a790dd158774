"""Configuration Management."""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="UIPLAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Server
    host: str = Field(default="127.0.0.1", description="HTTP bind address")
    port: int = Field(default=8000, gt=0, lt=65536, description="HTTP port")

    # Oracle
    ollama_url: str = Field(
        default="http://localhost:11434/api/chat", description="Ollama chat endpoint"
    )
    ollama_model: str = Field(default="qwen2.5:1.5b", description="Ollama model name")
    oracle_timeout: float = Field(default=120.0, gt=0, description="Oracle request timeout")
    oracle_temperature: float | None = Field(
        default=None, ge=0.0, le=2.0, description="Sampling temperature (model default if unset)"
    )

    # Planner
    max_message_length: int = Field(default=4000, gt=0, description="Instruction truncation limit")
    planner_repair_json: bool = Field(
        default=False, description="Repair malformed planner JSON before retrying"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    @field_validator("ollama_url")
    @classmethod
    def validate_ollama_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("ollama_url must be an http(s) URL")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
