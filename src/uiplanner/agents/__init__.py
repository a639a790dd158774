"""Agent orchestration: planning, explanation, and the end-to-end run."""

from .prompts import PromptBuilder
from .planner import PlanSynthesizer, PlannerError, SynthesisState
from .explainer import Explainer
from .agent import UIAgent, AgentResult

__all__ = [
    "PromptBuilder",
    "PlanSynthesizer",
    "PlannerError",
    "SynthesisState",
    "Explainer",
    "UIAgent",
    "AgentResult",
]
