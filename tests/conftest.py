"""Shared fixtures: a scripted upstream transport, a controllable clock and a wired policy."""

import random
from typing import Callable, List

import httpx
import pytest
import pytest_asyncio

from chatty.cache import ResponseCache
from chatty.fallback import KeywordResponder
from chatty.hf_client import HuggingFaceClient
from chatty.policy import AcceptabilityCheck, ResponsePolicy

MODELS = ["org/model-a", "org/model-b", "org/model-c"]
BASE_URL = "https://hf.test/models"


class FakeClock:
	def __init__(self) -> None:
		self.now = 1000.0

	def __call__(self) -> float:
		return self.now

	def advance(self, seconds: float) -> None:
		self.now += seconds


class ScriptedUpstream:
	"""MockTransport handler that records requested models and answers per model."""

	def __init__(self) -> None:
		self.calls: List[str] = []
		self.responders: dict = {}
		self.default: Callable[[httpx.Request], httpx.Response] = lambda request: generated("Urban Farm Lab grows food in the city.")

	def model_of(self, request: httpx.Request) -> str:
		return request.url.path.split("/models/", 1)[1]

	def __call__(self, request: httpx.Request) -> httpx.Response:
		model = self.model_of(request)
		self.calls.append(model)
		return self.responders.get(model, self.default)(request)

	def answer(self, model: str, text: str) -> None:
		self.responders[model] = lambda request: generated(text)

	def fail(self, model: str, code: int, body: str = "") -> None:
		self.responders[model] = status(code, body)

	def raise_(self, model: str, exc_type: type) -> None:
		def handler(request: httpx.Request) -> httpx.Response:
			raise exc_type("scripted failure", request=request)
		self.responders[model] = handler

	def answer_all(self, text: str) -> None:
		self.default = lambda request: generated(text)

	def fail_all(self, code: int, body: str = "") -> None:
		self.default = status(code, body)


def generated(text: str) -> httpx.Response:
	return httpx.Response(200, json=[{"generated_text": text}])


def status(code: int, body: str = "") -> Callable[[httpx.Request], httpx.Response]:
	return lambda request: httpx.Response(code, json={"error": body})


@pytest.fixture
def upstream() -> ScriptedUpstream:
	return ScriptedUpstream()


@pytest.fixture
def clock() -> FakeClock:
	return FakeClock()


@pytest_asyncio.fixture
async def hf_client(upstream):
	client = HuggingFaceClient(
		"hf_test_key",
		models=list(MODELS),
		base_url=BASE_URL,
		transport=httpx.MockTransport(upstream),
	)
	yield client
	await client.aclose()


@pytest.fixture
def cache(clock) -> ResponseCache:
	return ResponseCache(3600, timer=clock)


@pytest.fixture
def responder() -> KeywordResponder:
	return KeywordResponder(rng=random.Random(7))


@pytest.fixture
def policy(hf_client, cache, responder) -> ResponsePolicy:
	return ResponsePolicy(hf_client, cache, responder, AcceptabilityCheck(10, ["trouble connecting", "initializing"]))
