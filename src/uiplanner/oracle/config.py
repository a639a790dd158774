"""
Oracle configuration with strong typing.
Settings for an Ollama-compatible chat endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import Settings


class OllamaConfig(BaseModel):
    """Type-safe Ollama chat configuration."""

    model_config = ConfigDict(frozen=True)  # Immutable for thread safety

    url: str = Field(default="http://localhost:11434/api/chat")
    model_name: str = Field(default="qwen2.5:1.5b")
    timeout: float = Field(default=120.0, gt=0)
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)

    # Circuit breaker
    breaker_fail_max: int = Field(default=5, ge=1)
    breaker_reset_timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "OllamaConfig":
        return cls(
            url=settings.ollama_url,
            model_name=settings.ollama_model,
            timeout=settings.oracle_timeout,
            temperature=settings.oracle_temperature,
        )

    def model_copy_with_updates(self, **updates) -> "OllamaConfig":
        """Create updated config (immutable pattern)."""
        data = self.model_dump()
        data.update(updates)
        return OllamaConfig(**data)
