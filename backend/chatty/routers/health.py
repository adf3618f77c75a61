from __future__ import annotations
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..deps import get_policy
from ..policy import ResponsePolicy

SERVICE_NAME = "Chatty AI Backend"
SERVICE_VERSION = "1.0.1"
TEST_QUESTION = "What is Urban Farm Lab?"

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(policy: ResponsePolicy = Depends(get_policy)):
	return {
		"status": "OK",
		"timestamp": datetime.now(timezone.utc).isoformat(),
		"service": SERVICE_NAME,
		"version": SERVICE_VERSION,
		"upstream_configured": policy.client.configured,
		"cache_size": len(policy.cache),
	}


@router.get("/test")
async def upstream_test(policy: ResponsePolicy = Depends(get_policy)):
	# Goes straight to the upstream client: no cache, no keyword fallback
	result = await policy.client.query(TEST_QUESTION)
	return {
		"status": "API test completed",
		"response": result if isinstance(result, str) else None,
		"api_status": "available" if policy.acceptable(result) else "unavailable",
	}
