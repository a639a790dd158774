"""Explainer - prose description of a plan change."""

from ..core import get_logger
from ..oracle import ChatMessage, ChatOracle
from ..plan import UiPlan, summarize_diff
from .prompts import PromptBuilder


logger = get_logger(__name__)


class Explainer:
    """Asks the oracle to explain a plan change from its id-level diff."""

    def __init__(self, oracle: ChatOracle) -> None:
        self.oracle = oracle

    def explain(self, message: str, previous: UiPlan | None, next_plan: UiPlan) -> str:
        diff_summary = summarize_diff(previous, next_plan)
        logger.info("explain", diff=diff_summary)
        return self.oracle.chat(
            [
                ChatMessage(role="system", content=PromptBuilder.explainer_system()),
                ChatMessage(role="user", content=PromptBuilder.explainer_user(message, diff_summary)),
            ]
        )
