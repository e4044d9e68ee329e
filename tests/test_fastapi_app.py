import pytest
from fastapi.testclient import TestClient

import fastapi_app
from conversation import APOLOGY, ConversationState
from plan_client import PlanRequestClient


@pytest.fixture
def make_client(monkeypatch):
    def _make(llm):
        state = ConversationState(PlanRequestClient(llm=llm))
        monkeypatch.setattr(fastapi_app, "conversation", state)
        return TestClient(fastapi_app.app)
    return _make


class TestState:
    def test_initial_state(self, make_client, make_llm):
        with make_client(make_llm()) as client:
            body = client.get("/state").json()

        assert body["is_generating"] is False
        assert body["active_view"] == "DASHBOARD"
        assert body["active_plan"] is None
        assert len(body["messages"]) == 1
        assert "plan" not in body["messages"][0]


class TestChat:
    def test_plan_generated(self, make_client, make_llm, plan_json):
        with make_client(make_llm(plan_json)) as client:
            response = client.post("/chat", json={"user_message": "帮我分析下个月的预算分配方案"})
            state = client.get("/state").json()

        assert response.status_code == 200
        body = response.json()
        assert body["accepted"] is True
        assert body["active_view"] == "BUDGET"
        assert body["ai_message"]["plan"]["name"] == "Q3 Boost"
        assert body["ai_message"]["plan"]["allocations"][0]["expectedROI"] == 5.4
        assert len(state["messages"]) == 3
        assert state["active_plan"]["totalBudget"] == 100000

    def test_blank_message_not_accepted(self, make_client, make_llm):
        llm = make_llm()
        with make_client(llm) as client:
            body = client.post("/chat", json={"user_message": "  "}).json()

        assert body == {"accepted": False}
        assert llm.calls == []

    def test_failure_returns_apology(self, make_client, make_llm):
        with make_client(make_llm(RuntimeError("auth error"))) as client:
            body = client.post("/chat", json={"user_message": "优惠券"}).json()

        assert body["accepted"] is True
        assert body["ai_message"] == {"role": "assistant", "content": APOLOGY}
        assert body["active_view"] == "DASHBOARD"


class TestView:
    def test_set_view(self, make_client, make_llm):
        with make_client(make_llm()) as client:
            response = client.post("/view", json={"view": "analysis"})
            state = client.get("/state").json()

        assert response.json() == {"active_view": "ANALYSIS"}
        assert state["active_view"] == "ANALYSIS"

    def test_unknown_view(self, make_client, make_llm):
        with make_client(make_llm()) as client:
            response = client.post("/view", json={"view": "settings"})

        assert response.status_code == 400


class TestStartup:
    def test_missing_key_fails_per_request(self, monkeypatch):
        monkeypatch.setattr(fastapi_app, "conversation", None)
        monkeypatch.setattr(fastapi_app, "OPENAI_API_KEY", None)

        with TestClient(fastapi_app.app) as client:
            body = client.post("/chat", json={"user_message": "预算"}).json()

        assert body["ai_message"]["content"] == APOLOGY


def test_dashboard_snapshot(make_client, make_llm):
    with make_client(make_llm()) as client:
        body = client.get("/dashboard").json()

    assert len(body["metric_cards"]) == 4
    assert body["strategies"][0]["targetSegment"] == "沉睡30天用户"
