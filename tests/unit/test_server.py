"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from uiplanner.server import create_app


@pytest.fixture
def client_for(make_agent):
    """Build a TestClient around a scripted agent."""

    def _make(replies):
        agent, oracle = make_agent(replies)
        return TestClient(create_app(agent)), oracle

    return _make


@pytest.mark.unit
def test_health(client_for):
    """Test health endpoint."""
    client, _ = client_for([])
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.unit
def test_agent_success(client_for, sample_plan_json):
    """Test a successful generation response."""
    client, _ = client_for([sample_plan_json, "Here is your form."])

    response = client.post("/api/agent", json={"mode": "initial", "message": "Signup form"})

    assert response.status_code == 200
    body = response.json()
    assert body["plan"]["layout"]["layoutStyle"] == "form"
    assert body["plan"]["root"]["kind"] == "page"
    assert "export function GeneratedUI()" in body["code"]
    assert body["explanation"] == "Here is your form."


@pytest.mark.unit
@pytest.mark.parametrize(
    "payload",
    [
        {"message": "hi"},
        {"mode": "initial"},
        {"mode": "rewrite", "message": "hi"},
        {"mode": "initial", "message": ""},
        {"mode": "initial", "message": 5},
    ],
)
def test_agent_missing_fields(client_for, payload):
    """Test malformed requests are rejected before any oracle call."""
    client, oracle = client_for([])

    response = client.post("/api/agent", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing mode or message"}
    assert oracle.calls == []


@pytest.mark.unit
def test_agent_long_message_is_truncated(client_for, sample_plan_json):
    """Test oversized instructions are cut to the configured length, not rejected."""
    client, oracle = client_for([sample_plan_json, "Done."])

    response = client.post("/api/agent", json={"mode": "initial", "message": "x" * 20001})

    assert response.status_code == 200
    instruction = oracle.calls[0][1].content.split("\n")[1]
    assert instruction == "x" * 4000
    assert "Latest user instruction:\n" + "x" * 4000 + "\n" in oracle.calls[1][1].content


@pytest.mark.unit
def test_agent_whitespace_message_accepted(client_for, sample_plan_json):
    """Test a present but blank instruction still reaches the planner."""
    client, oracle = client_for([sample_plan_json, "Done."])

    response = client.post("/api/agent", json={"mode": "initial", "message": "   "})

    assert response.status_code == 200
    assert len(oracle.calls) == 2


@pytest.mark.unit
def test_agent_non_object_body(client_for):
    """Test non-object JSON bodies are rejected."""
    client, _ = client_for([])
    response = client.post("/api/agent", json=["initial", "hi"])
    assert response.status_code == 400


@pytest.mark.unit
def test_agent_invalid_current_plan(client_for):
    """Test a malformed current plan is rejected with its validation message."""
    client, oracle = client_for([])

    response = client.post(
        "/api/agent",
        json={
            "mode": "modify",
            "message": "Add a chart",
            "currentPlan": {"layout": {"layoutStyle": "form"}, "root": {"id": "r", "kind": "grid"}},
        },
    )

    assert response.status_code == 400
    assert 'unsupported kind "grid"' in response.json()["error"]
    assert oracle.calls == []


@pytest.mark.unit
def test_agent_empty_current_plan_rejected(client_for):
    """Test an empty currentPlan object is validated, not treated as absent."""
    client, oracle = client_for([])

    response = client.post("/api/agent", json={"mode": "modify", "message": "hi", "currentPlan": {}})

    assert response.status_code == 400
    assert response.json() == {"error": "UiPlan.layout must be an object"}
    assert oracle.calls == []


@pytest.mark.unit
def test_agent_uses_current_plan(client_for, sample_plan_dict, sample_plan_json):
    """Test the current plan reaches the planner prompt."""
    client, oracle = client_for([sample_plan_json, "No structural change."])

    response = client.post(
        "/api/agent",
        json={"mode": "modify", "message": "Tweak copy", "currentPlan": sample_plan_dict},
    )

    assert response.status_code == 200
    assert '"id": "submit"' in oracle.calls[0][1].content
    assert "keeping the same set of nodes" in oracle.calls[1][1].content


@pytest.mark.unit
def test_agent_planner_failure(client_for):
    """Test planner failures surface as a 500 with the message."""
    client, oracle = client_for(["nope", "nope again"])

    response = client.post("/api/agent", json={"mode": "initial", "message": "Dashboard"})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Agent failed to generate UI."
    assert body["detail"] == "Planner failed to return valid JSON plan"
    assert len(oracle.calls) == 2
