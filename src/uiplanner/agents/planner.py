"""Plan Synthesis - oracle output to a validated UiPlan.

Syntactic failures (no parseable JSON object) are soft: the oracle is asked
once more with a corrective instruction. Schema failures are hard and are
never retried.
"""

from enum import Enum
from typing import Any

from returns.result import Result, Success

from ..core import JSONParseError, get_logger, parse_json_object
from ..oracle import ChatMessage, ChatOracle
from ..plan import PlanValidationError, PlanValidator, UiPlan, duplicate_ids, flatten_nodes
from .prompts import PromptBuilder


logger = get_logger(__name__)


class SynthesisState(str, Enum):
    """Lifecycle of one synthesis call."""

    DRAFTING = "drafting"
    AWAITING_ORACLE = "awaiting-oracle"
    PARSED = "parsed"
    RETRYING = "retrying"
    VALIDATED = "validated"
    FAILED = "failed"


class PlannerError(Exception):
    """The oracle never produced a parseable JSON object."""

    def __init__(self, message: str, attempts: int, last_error: JSONParseError | None = None) -> None:
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class PlanSynthesizer:
    """Turns an instruction (and optional current plan) into a validated plan."""

    MAX_ATTEMPTS = 2

    def __init__(
        self,
        oracle: ChatOracle,
        validator: PlanValidator | None = None,
        repair_json: bool = False,
    ) -> None:
        self.oracle = oracle
        self.validator = validator or PlanValidator()
        self.repair_json = repair_json

    def synthesize(self, mode: str, message: str, current_plan: UiPlan | None = None) -> UiPlan:
        """
        Run the planning protocol.

        Args:
            mode: initial, modify or regenerate
            message: User instruction, already sanitized by the caller
            current_plan: Plan to modify, if any

        Returns:
            Validated plan

        Raises:
            PlannerError: Both attempts returned unparseable text
            PlanValidationError: Parsed JSON violates the schema
            OracleError: Transport failure (propagated from the oracle)
        """
        self._transition(SynthesisState.DRAFTING, mode=mode, has_current=current_plan is not None)
        system_prompt = PromptBuilder.planner_system()
        user_prompt = PromptBuilder.planner_user(message, mode, current_plan)

        result = self._ask(system_prompt, user_prompt, attempt=1)
        if not isinstance(result, Success):
            self._transition(SynthesisState.RETRYING, error=str(result.failure()))
            result = self._ask(system_prompt, PromptBuilder.planner_retry(user_prompt), attempt=2)

        if not isinstance(result, Success):
            error = result.failure()
            self._transition(SynthesisState.FAILED, reason="invalid_json", error=str(error))
            raise PlannerError(
                "Planner failed to return valid JSON plan", attempts=self.MAX_ATTEMPTS, last_error=error
            )

        try:
            plan = self.validator.validate(result.unwrap())
        except PlanValidationError as e:
            self._transition(SynthesisState.FAILED, reason="invalid_plan", path=e.path, error=str(e))
            raise

        duplicates = duplicate_ids(plan.root)
        if duplicates:
            logger.warning("duplicate_node_ids", ids=duplicates)

        self._transition(SynthesisState.VALIDATED, nodes=len(flatten_nodes(plan.root)))
        return plan

    def _ask(
        self, system_prompt: str, user_prompt: str, attempt: int
    ) -> Result[dict[str, Any], JSONParseError]:
        self._transition(SynthesisState.AWAITING_ORACLE, attempt=attempt)
        text = self.oracle.chat(
            [
                ChatMessage(role="system", content=system_prompt),
                ChatMessage(role="user", content=user_prompt),
            ]
        )
        result = parse_json_object(text, repair=self.repair_json)
        if isinstance(result, Success):
            self._transition(SynthesisState.PARSED, attempt=attempt)
        return result

    @staticmethod
    def _transition(state: SynthesisState, **context: Any) -> None:
        log = logger.warning if state is SynthesisState.FAILED else logger.info
        log("synthesis_state", state=state.value, **context)
