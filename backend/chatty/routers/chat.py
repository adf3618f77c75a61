from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..deps import get_policy
from ..policy import QuestionRequiredError, ResponsePolicy

router = APIRouter(prefix="/api", tags=["chat"])


class ChatRequest(BaseModel):
	question: Optional[str] = None


class ChatResponse(BaseModel):
	answer: str
	source: str


@router.post("/chat", response_model=ChatResponse)
async def chat(req: Optional[ChatRequest] = None, policy: ResponsePolicy = Depends(get_policy)):
	try:
		result = await policy.answer(req.question if req else None)
	except QuestionRequiredError as e:
		return JSONResponse(status_code=400, content={"error": str(e)})
	return ChatResponse(answer=result.text, source=result.source.value)
