"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    AgentMode,
    AgentRequest,
    sanitize_user_message,
    check_plan_payload,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    extract_json,
    parse_json_object,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "AgentMode",
    "AgentRequest",
    "sanitize_user_message",
    "check_plan_payload",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "parse_json_object",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # DI
    "create_container",
]
