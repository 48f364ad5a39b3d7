# chat.py
from fastapi import APIRouter, HTTPException
import logging

import orchestrator
from models.request_models import ChatRequest, ChatResponse, MentorMessage
from services import llm_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

SUPPORTED_PROVIDER = "gemini"


@router.post("/api/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_endpoint(request: ChatRequest):
    """
    Forward the last message to Gemini. Model failures come back as a
    canned plan flagged fallback=true instead of an error.
    """
    if not request.messages:
        raise HTTPException(status_code=400, detail="Invalid request parameters: messages array required")

    provider = request.provider or SUPPORTED_PROVIDER
    if provider != SUPPORTED_PROVIDER:
        raise HTTPException(status_code=400, detail='Invalid provider. Use "gemini"')

    # Earlier turns are not sent as context, only the final message
    user_message = request.messages[-1].content
    system_instruction = next((m.content for m in request.messages if m.role == "system"), None)

    completion = await llm_client.complete(
        system_instruction,
        user_message,
        max_tokens=request.max_tokens or llm_client.DEFAULT_MAX_TOKENS,
        temperature=request.temperature if request.temperature is not None else llm_client.DEFAULT_TEMPERATURE,
        model_name=request.model,
    )
    if completion.used_fallback:
        return ChatResponse(response=completion.text, fallback=True)
    return ChatResponse(response=completion.text)


@router.post("/api/mentor/{session_id}/messages")
async def send_mentor_message(session_id: str, payload: MentorMessage):
    result = await orchestrator.send_chat_message(session_id, payload.message)
    if result is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return result
