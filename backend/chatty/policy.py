from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .cache import ResponseCache
from .fallback import KeywordResponder
from .hf_client import NO_ANSWER, HuggingFaceClient, QueryResult

logger = logging.getLogger(__name__)


class Source(str, Enum):
	CACHE = "cache"
	UPSTREAM = "upstream"
	FALLBACK = "fallback"
	ERROR_FALLBACK = "error-fallback"


class QuestionRequiredError(ValueError):
	def __init__(self) -> None:
		super().__init__("Question is required")


@dataclass(frozen=True)
class Answer:
	text: str
	source: Source


class AcceptabilityCheck:
	"""Rejects upstream text that is empty, too short, or the service apologising for itself."""

	def __init__(self, min_length: int = 10, failure_phrases: Sequence[str] = ("trouble connecting", "initializing")) -> None:
		self.min_length = min_length
		self.failure_phrases = [p.lower() for p in failure_phrases]

	def __call__(self, result: QueryResult) -> bool:
		if result is NO_ANSWER or not isinstance(result, str):
			return False
		text = result.strip()
		if not text or len(text) < self.min_length:
			return False
		lowered = text.lower()
		return not any(phrase in lowered for phrase in self.failure_phrases)


class ResponsePolicy:
	def __init__(
		self,
		client: HuggingFaceClient,
		cache: ResponseCache,
		responder: KeywordResponder,
		acceptable: Optional[AcceptabilityCheck] = None,
	) -> None:
		self.client = client
		self.cache = cache
		self.responder = responder
		self.acceptable = acceptable or AcceptabilityCheck()

	async def answer(self, raw_question: Optional[str]) -> Answer:
		if raw_question is None or not str(raw_question).strip():
			raise QuestionRequiredError()
		question = str(raw_question).strip()
		logger.info("Question received: %s", question)

		cached = self.cache.get(question)
		if cached is not None:
			logger.info("Serving from cache")
			return Answer(cached, Source.CACHE)

		try:
			return await self._answer_fresh(question)
		except Exception:
			logger.exception("Unexpected error answering %r; using keyword fallback", question)
			return Answer(self.responder.respond(question), Source.ERROR_FALLBACK)

	async def _answer_fresh(self, question: str) -> Answer:
		result = await self.client.query(question)
		if self.acceptable(result):
			text, source = str(result), Source.UPSTREAM
		else:
			logger.info("Upstream answer unusable; using fallback response")
			text, source = self.responder.respond(question), Source.FALLBACK

		text = text.strip()
		if not text:
			text = self.responder.default_answer

		self.cache.set(question, text)
		logger.info("Response generated (%s): %s...", source.value, text[:100])
		return Answer(text, source)
