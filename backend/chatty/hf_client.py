from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from .prompts import ANSWER_MARKER, build_chat_prompt
from .settings import settings

logger = logging.getLogger(__name__)


class _NoAnswer:
	"""Returned by ``HuggingFaceClient.query`` when no endpoint produced text."""

	def __bool__(self) -> bool:
		return False

	def __repr__(self) -> str:
		return "NO_ANSWER"


NO_ANSWER = _NoAnswer()

QueryResult = Union[str, _NoAnswer]

# Statuses the Inference API uses while a model is loading or the service is saturated
TRANSIENT_STATUSES = {429, 503}
_TRANSIENT_HINTS = ("loading", "overloaded", "unavailable")


class EndpointRing:
	"""Ordered model ids plus the shared cursor naming the one to try first."""

	def __init__(self, models: List[str]) -> None:
		self.models = list(models)
		self.cursor = 0

	def __len__(self) -> int:
		return len(self.models)

	def current(self) -> int:
		return self.cursor

	def advance(self, from_index: int) -> int:
		# Last writer wins when concurrent requests rotate at the same time
		self.cursor = (from_index + 1) % len(self.models)
		return self.cursor


class HuggingFaceClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		models: Optional[List[str]] = None,
		base_url: Optional[str] = None,
		max_new_tokens: Optional[int] = None,
		temperature: Optional[float] = None,
		timeout: Optional[float] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None,
	) -> None:
		self.api_key = api_key if api_key is not None else settings.hf_api_key
		self.ring = EndpointRing(models if models is not None else settings.endpoint_models)
		self.base_url = (base_url or settings.hf_api_base).rstrip("/")
		self.max_new_tokens = max_new_tokens if max_new_tokens is not None else settings.max_new_tokens
		self.temperature = temperature if temperature is not None else settings.temperature
		self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
		self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

	@property
	def configured(self) -> bool:
		return bool(self.api_key) and len(self.ring) > 0

	def endpoint_url(self, model: str) -> str:
		return f"{self.base_url}/{model}"

	async def query(self, question: str) -> QueryResult:
		if not self.configured:
			logger.warning("HF_API_KEY or model list not configured; skipping upstream call")
			return NO_ANSWER
		prompt = build_chat_prompt(question)
		index = self.ring.current()
		for _ in range(len(self.ring)):
			model = self.ring.models[index]
			logger.info("Querying upstream model %s", model)
			try:
				return await self._generate(model, prompt)
			except httpx.HTTPStatusError as http_err:
				if not self._is_transient(http_err.response):
					logger.error("Upstream %s rejected request (%s): %s", model, http_err.response.status_code, http_err.response.text)
					return NO_ANSWER
				index = self.ring.advance(index)
				logger.warning(
					"Upstream %s unavailable (%s); rotating to %s",
					model,
					http_err.response.status_code,
					self.ring.models[index],
				)
			except httpx.TimeoutException:
				logger.error("Upstream %s timed out after %ss", model, self.timeout)
				return NO_ANSWER
			except httpx.RequestError as net_err:
				logger.error("Upstream %s network error: %s", model, net_err)
				return NO_ANSWER
			except ValueError as parse_err:
				logger.error("Unexpected upstream response from %s: %s", model, parse_err)
				return NO_ANSWER
		logger.error("All %d upstream endpoints unavailable", len(self.ring))
		return NO_ANSWER

	async def _generate(self, model: str, prompt: str) -> str:
		payload: Dict[str, Any] = {
			"inputs": prompt,
			"parameters": {
				"max_new_tokens": self.max_new_tokens,
				"temperature": self.temperature,
				"do_sample": True,
				"return_full_text": False,
			},
		}
		headers = {
			"Authorization": f"Bearer {self.api_key}",
			"Content-Type": "application/json",
		}
		r = await self._client.post(self.endpoint_url(model), headers=headers, json=payload)
		r.raise_for_status()
		return self._extract_text(r.json())

	@staticmethod
	def _extract_text(data: Any) -> str:
		if isinstance(data, list) and data:
			data = data[0]
		if not isinstance(data, dict) or "generated_text" not in data:
			raise ValueError(f"no generated_text in {data!r}")
		text = str(data.get("generated_text") or "")
		if ANSWER_MARKER in text:
			text = text.split(ANSWER_MARKER, 1)[1]
		return text.strip()

	@staticmethod
	def _is_transient(response: httpx.Response) -> bool:
		if response.status_code in TRANSIENT_STATUSES:
			return True
		if response.status_code >= 500:
			body = response.text.lower()
			return any(hint in body for hint in _TRANSIENT_HINTS)
		return False

	async def aclose(self) -> None:
		await self._client.aclose()
