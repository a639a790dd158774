"""UI Agent - one request from instruction to plan, code and explanation."""

from dataclasses import dataclass

from ..codegen import generate_code
from ..core import AgentMode, LogContext, get_logger, sanitize_user_message
from ..core.validate import DEFAULT_MAX_MESSAGE_LENGTH
from ..plan import UiPlan
from .explainer import Explainer
from .planner import PlanSynthesizer


logger = get_logger(__name__)


@dataclass(frozen=True)
class AgentResult:
    """Outcome of a successful run; failures raise instead."""

    plan: UiPlan
    code: str
    explanation: str

    def to_wire(self) -> dict:
        return {"plan": self.plan.to_wire(), "code": self.code, "explanation": self.explanation}


class UIAgent:
    """Orchestrates planning, code generation and explanation."""

    def __init__(
        self,
        planner: PlanSynthesizer,
        explainer: Explainer,
        max_message_length: int = DEFAULT_MAX_MESSAGE_LENGTH,
    ) -> None:
        self.planner = planner
        self.explainer = explainer
        self.max_message_length = max_message_length

    def run(self, mode: AgentMode, message: str, current_plan: UiPlan | None = None) -> AgentResult:
        """
        Produce a new plan, its source code and an explanation.

        Nothing is returned on failure: any planner, validation or oracle
        error propagates to the caller, who keeps its previous plan.
        """
        with LogContext(mode=mode):
            # Planner and explainer must see the same instruction text
            sanitized = sanitize_user_message(message, self.max_message_length)
            plan = self.planner.synthesize(mode, sanitized, current_plan)
            code = generate_code(plan)
            explanation = self.explainer.explain(sanitized, current_plan, plan)

            logger.info("agent_complete", code_lines=code.count("\n"), explanation_chars=len(explanation))
            return AgentResult(plan=plan, code=code, explanation=explanation)
