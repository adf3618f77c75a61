from __future__ import annotations
from typing import Optional

from .cache import ResponseCache
from .fallback import KeywordResponder
from .hf_client import HuggingFaceClient
from .policy import AcceptabilityCheck, ResponsePolicy
from .settings import settings

# Process-wide: the cache and the endpoint cursor are shared by every request
_policy: Optional[ResponsePolicy] = None


def build_policy() -> ResponsePolicy:
	return ResponsePolicy(
		client=HuggingFaceClient(),
		cache=ResponseCache(settings.cache_ttl_seconds, maxsize=settings.cache_max_entries),
		responder=KeywordResponder(),
		acceptable=AcceptabilityCheck(settings.min_answer_length, settings.failure_phrase_list),
	)


async def get_policy() -> ResponsePolicy:
	global _policy
	if _policy is None:
		_policy = build_policy()
	return _policy


async def close_policy() -> None:
	global _policy
	if _policy is not None:
		await _policy.client.aclose()
		_policy = None
