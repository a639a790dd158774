"""Oracle Client - Ollama chat API with circuit breaker protection."""

from collections.abc import Sequence
from typing import Any, Protocol

import httpx
import pybreaker
from pydantic import BaseModel, Field

from ..core import get_logger
from .config import OllamaConfig


logger = get_logger(__name__)


class OracleError(Exception):
    """Oracle transport failed or returned a non-success status."""

    def __init__(self, message: str, status: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class ChatMessage(BaseModel):
    """Chat message."""

    role: str = Field(..., pattern="^(user|assistant|system)$")
    content: str


class ChatOracle(Protocol):
    """Anything that can answer an ordered list of chat messages with text."""

    def chat(self, messages: Sequence[ChatMessage]) -> str: ...


class _BreakerListener(pybreaker.CircuitBreakerListener):
    """Logs circuit breaker state changes."""

    def state_change(self, cb, old_state, new_state):
        logger.warning(
            "breaker_state_change",
            breaker=cb.name,
            from_state=str(old_state),
            to_state=str(new_state),
        )


class OllamaClient:
    """
    Stateless chat client for an Ollama-compatible endpoint.

    Failures are never retried here; a circuit breaker fails fast once the
    service has failed repeatedly.
    """

    def __init__(self, config: OllamaConfig, client: httpx.Client | None = None) -> None:
        self.config = config
        self._client = client or httpx.Client(timeout=config.timeout)
        self._breaker = pybreaker.CircuitBreaker(
            fail_max=config.breaker_fail_max,
            reset_timeout=config.breaker_reset_timeout,
            name="oracle-http",
            listeners=[_BreakerListener()],
            # The tripping call keeps its own status and body
            throw_new_error_on_trip=False,
        )

        logger.info("client_init", url=config.url, model=config.model_name)

    def _payload(self, messages: Sequence[ChatMessage]) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.config.model_name,
            "messages": [message.model_dump() for message in messages],
            "stream": False,
        }
        if self.config.temperature is not None:
            payload["options"] = {"temperature": self.config.temperature}
        return payload

    def chat(self, messages: Sequence[ChatMessage | dict[str, str]]) -> str:
        """
        Send messages and return the assistant's text.

        Args:
            messages: Ordered chat messages

        Returns:
            Raw response text (empty if the service returned no content)

        Raises:
            OracleError: On transport failure, non-2xx status, or open breaker
        """
        validated = [ChatMessage.model_validate(m) for m in messages]
        payload = self._payload(validated)

        def _make_request() -> httpx.Response:
            response = self._client.post(self.config.url, json=payload)
            if not response.is_success:
                raise OracleError(
                    f"Ollama error {response.status_code}: {response.text}",
                    status=response.status_code,
                    body=response.text,
                )
            return response

        logger.info("oracle_call", model=self.config.model_name, messages=len(validated))

        try:
            response = self._breaker.call(_make_request)
        except pybreaker.CircuitBreakerError as e:
            logger.error("oracle_unavailable", error=str(e))
            raise OracleError("Ollama unavailable: circuit breaker open") from e
        except OracleError as e:
            logger.error("oracle_status_error", status=e.status)
            raise
        except httpx.HTTPError as e:
            logger.error("oracle_transport_error", error=str(e))
            raise OracleError(f"Ollama request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise OracleError(f"Ollama returned invalid JSON: {e}", status=response.status_code) from e

        message = data.get("message") if isinstance(data, dict) else None
        content = message.get("content") if isinstance(message, dict) else None
        text = content if isinstance(content, str) else ""

        logger.info("oracle_response", chars=len(text))
        return text

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
