"""
Oracle package - text-completion service adapter.
The rest of the system sees only ``chat(messages) -> str``.
"""

from .config import OllamaConfig
from .client import ChatMessage, ChatOracle, OllamaClient, OracleError

__all__ = [
    "OllamaConfig",
    "ChatMessage",
    "ChatOracle",
    "OllamaClient",
    "OracleError",
]
