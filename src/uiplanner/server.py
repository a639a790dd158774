"""
UI Planner HTTP service.
Thin FastAPI wrapper around the agent; holds no state between requests.
"""

from typing import Any

import pydantic
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from . import __version__
from .agents import PlannerError, UIAgent
from .core import (
    AgentRequest,
    ValidationError,
    check_plan_payload,
    configure_logging,
    create_container,
    get_logger,
    get_settings,
)
from .oracle import OracleError
from .plan import validate_plan


logger = get_logger(__name__)


def _error(status: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message, **extra})


def create_app(agent: UIAgent | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        agent: Agent to serve; resolved from the DI container when omitted
    """
    if agent is None:
        agent = create_container().get(UIAgent)

    app = FastAPI(
        title="UI Planner",
        description="Natural-language UI requests to validated plans and React code",
        version=__version__,
    )
    app.state.agent = agent

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/agent")
    async def run_agent(request: Request) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            return _error(400, "Request body must be JSON")

        if not isinstance(body, dict):
            return _error(400, "Request body must be a JSON object")

        try:
            validated = AgentRequest.model_validate(body)
        except pydantic.ValidationError as e:
            fields = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            if fields & {"mode", "message"}:
                return _error(400, "Missing mode or message")
            return _error(400, "Invalid request", detail=str(e))

        current_plan = None
        if validated.current_plan is not None:
            try:
                check_plan_payload(validated.current_plan)
                current_plan = validate_plan(validated.current_plan)
            except ValidationError as e:
                logger.warning("invalid_current_plan", error=str(e))
                return _error(400, str(e))

        logger.info("agent_request", mode=validated.mode, message=validated.message[:50])

        try:
            result = await run_in_threadpool(
                app.state.agent.run, validated.mode, validated.message, current_plan
            )
        except (PlannerError, ValidationError, OracleError) as e:
            logger.error("agent_failed", error=str(e), error_type=type(e).__name__)
            return _error(500, "Agent failed to generate UI.", detail=str(e))

        return JSONResponse(content=result.to_wire())

    return app


def main() -> None:
    """Run the service with uvicorn."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level, settings.json_logs)

    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
