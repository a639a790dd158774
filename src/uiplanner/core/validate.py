"""Request validation and instruction sanitization."""

import re
from typing import Any, Literal

from pydantic import BaseModel, Field, ConfigDict

from .json import JSONParseError, safe_json_dumps, validate_json_depth, validate_json_size


# Validation limits
MAX_PLAN_SIZE = 512 * 1024  # 512KB
MAX_PLAN_DEPTH = 64
DEFAULT_MAX_MESSAGE_LENGTH = 4000

AgentMode = Literal["initial", "modify", "regenerate"]

_INJECTION_PATTERN = re.compile(r"ignore (all )?previous instructions", re.IGNORECASE)


class ValidationError(Exception):
    """Validation failed."""

    pass


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="ignore", frozen=True, populate_by_name=True
    )


class AgentRequest(RequestValidator):
    """Validated agent request as received from the HTTP layer."""

    mode: AgentMode
    # Long instructions are truncated by sanitize_user_message, not rejected
    message: str = Field(min_length=1)
    current_plan: dict[str, Any] | None = Field(default=None, alias="currentPlan")


def sanitize_user_message(message: str, max_length: int = DEFAULT_MAX_MESSAGE_LENGTH) -> str:
    """
    Strip the known prompt-injection phrase and truncate.

    Best-effort only; this is not a general sanitizer.
    """
    return _INJECTION_PATTERN.sub("", message)[:max_length]


def check_plan_payload(plan: dict[str, Any]) -> None:
    """
    Bound the size and depth of a client-supplied plan before validating it.

    Raises:
        ValidationError: If the payload is too large or too deep
    """
    try:
        validate_json_size(safe_json_dumps(plan), MAX_PLAN_SIZE, "currentPlan")
        validate_json_depth(plan, MAX_PLAN_DEPTH)
    except JSONParseError as e:
        raise ValidationError(str(e)) from e
