"""Pytest configuration and fixtures."""

import os
from collections.abc import Sequence

import pytest

from uiplanner.agents import Explainer, PlanSynthesizer, UIAgent
from uiplanner.oracle import ChatMessage, OllamaConfig
from uiplanner.plan import validate_plan


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["UIPLAN_LOG_LEVEL"] = "DEBUG"
    os.environ["UIPLAN_OLLAMA_URL"] = "http://ollama.test/api/chat"


# ============================================================================
# Oracle Fixtures
# ============================================================================

class StubOracle:
    """Scripted oracle: returns queued replies and records every call."""

    def __init__(self, replies: Sequence[str]) -> None:
        self.replies = list(replies)
        self.calls: list[list[ChatMessage]] = []

    def chat(self, messages: Sequence[ChatMessage]) -> str:
        self.calls.append(list(messages))
        if not self.replies:
            raise AssertionError("oracle called more times than scripted")
        return self.replies.pop(0)


@pytest.fixture
def stub_oracle_factory():
    """Build a StubOracle from a list of replies."""
    return StubOracle


@pytest.fixture
def ollama_config():
    """Ollama config pointing at a mocked endpoint."""
    return OllamaConfig(url="http://ollama.test/api/chat", model_name="test-model", timeout=5.0)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def sample_plan_dict():
    """Raw plan as an oracle would return it."""
    return {
        "summary": "Signup form",
        "layout": {"layoutStyle": "form", "hasNavbar": True},
        "root": {
            "id": "root",
            "kind": "page",
            "props": {"title": "Sign up"},
            "children": [
                {"id": "nav", "kind": "navbar", "props": {"title": "Acme"}},
                {
                    "id": "form",
                    "kind": "card",
                    "props": {"title": "Create account"},
                    "children": [
                        {"id": "email", "kind": "input", "props": {"label": "Email", "type": "email"}},
                        {"id": "submit", "kind": "button", "props": {"label": "Create", "variant": "primary"}},
                    ],
                },
            ],
        },
        "changes": [{"kind": "add", "targetId": "form", "description": "Added signup card"}],
    }


@pytest.fixture
def sample_plan(sample_plan_dict):
    """Validated sample plan."""
    return validate_plan(sample_plan_dict)


@pytest.fixture
def sample_plan_json(sample_plan_dict):
    """Sample plan wrapped the way chat models tend to reply."""
    import json

    return "Here is the plan:\n```json\n" + json.dumps(sample_plan_dict) + "\n```"


# ============================================================================
# Agent Fixtures
# ============================================================================

@pytest.fixture
def make_agent():
    """Build a UIAgent whose planner and explainer share one stub oracle."""

    def _make(replies: Sequence[str], **agent_kwargs) -> tuple[UIAgent, StubOracle]:
        oracle = StubOracle(replies)
        agent = UIAgent(PlanSynthesizer(oracle), Explainer(oracle), **agent_kwargs)
        return agent, oracle

    return _make
