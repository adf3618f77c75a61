"""HTTP surface: /api/chat, /health, /test and the discovery root."""

import pytest
from fastapi.testclient import TestClient

from chatty.deps import get_policy
from chatty.fallback import KEYWORD_RULES
from chatty.main import app


@pytest.fixture
def client(policy):
	app.dependency_overrides[get_policy] = lambda: policy
	yield TestClient(app)
	app.dependency_overrides.clear()


def test_chat_returns_upstream_then_cache(client) -> None:
	first = client.post("/api/chat", json={"question": "What is Urban Farm Lab?"})
	assert first.status_code == 200
	assert first.json() == {"answer": "Urban Farm Lab grows food in the city.", "source": "upstream"}

	second = client.post("/api/chat", json={"question": "What is Urban Farm Lab?"})
	assert second.status_code == 200
	assert second.json()["source"] == "cache"
	assert second.json()["answer"] == first.json()["answer"]


@pytest.mark.parametrize("body", [{}, {"question": ""}, {"question": "   "}, {"question": None}])
def test_chat_requires_question(client, body) -> None:
	r = client.post("/api/chat", json=body)
	assert r.status_code == 400
	assert r.json() == {"error": "Question is required"}


def test_chat_without_body_is_a_client_error(client) -> None:
	r = client.post("/api/chat")
	assert r.status_code == 400


def test_upstream_outage_still_answers_200(client, upstream) -> None:
	upstream.fail_all(503)
	r = client.post("/api/chat", json={"question": "Hello"})
	assert r.status_code == 200
	assert r.json() == {"answer": KEYWORD_RULES[0].answer, "source": "fallback"}


def test_health_reports_status_and_cache_size(client) -> None:
	client.post("/api/chat", json={"question": "Hello"})
	r = client.get("/health")
	assert r.status_code == 200
	data = r.json()
	assert data["status"] == "OK"
	assert data["timestamp"]
	assert data["upstream_configured"] is True
	assert data["cache_size"] == 1


def test_upstream_test_endpoint(client, upstream) -> None:
	r = client.get("/test")
	assert r.json()["api_status"] == "available"
	assert r.json()["response"] == "Urban Farm Lab grows food in the city."

	upstream.fail_all(401)
	r = client.get("/test")
	assert r.json() == {"status": "API test completed", "response": None, "api_status": "unavailable"}


def test_root_lists_endpoints(client) -> None:
	data = client.get("/").json()
	assert data["status"] == "operational"
	assert data["endpoints"]["chat"] == "POST /api/chat"
	assert isinstance(data["models"], list)
