# services/mentor_client.py
import logging
from typing import Optional, Protocol

import httpx
from pydantic import BaseModel

import config
from models.request_models import ChatMessage, ChatRequest
from services import llm_client

logger = logging.getLogger(__name__)


class TransportFailure(Exception):
    """The /api/chat call failed: network error, non-2xx status or unreadable body."""


class MentorReply(BaseModel):
    response: str = ""
    fallback: bool = False


class Mentor(Protocol):
    async def send(
        self,
        system_instruction: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> MentorReply: ...


class LocalMentor:
    """Calls the model in-process. Failures already come back as fallback text."""

    def __init__(self, model_name: Optional[str] = None):
        self.model_name = model_name

    async def send(self, system_instruction, user_message, max_tokens, temperature):
        completion = await llm_client.complete(
            system_instruction,
            user_message,
            max_tokens=max_tokens,
            temperature=temperature,
            model_name=self.model_name,
        )
        return MentorReply(response=completion.text, fallback=completion.used_fallback)


class MentorApiClient:
    """Talks to a MindMate server over HTTP, the way the browser widget does."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        provider: str = "gemini",
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or config.MINDMATE_API_URL
        self.provider = provider
        self.model = model
        self.timeout = timeout if timeout is not None else config.MENTOR_API_TIMEOUT
        self.transport = transport

    def build_request(self, system_instruction, user_message, max_tokens, temperature) -> ChatRequest:
        return ChatRequest(
            provider=self.provider,
            model=self.model,
            messages=[
                ChatMessage(role="system", content=system_instruction),
                ChatMessage(role="user", content=user_message),
            ],
            max_tokens=max_tokens,
            temperature=temperature,
        )

    async def send(self, system_instruction, user_message, max_tokens, temperature):
        payload = self.build_request(system_instruction, user_message, max_tokens, temperature)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.post("/api/chat", json=payload.model_dump(exclude_none=True))
        except httpx.HTTPError as e:
            logger.error(f"Mentor API request failed: {e}")
            raise TransportFailure(f"Mentor API request failed: {e}") from e

        if not response.is_success:
            logger.error(f"Mentor API failed: {response.status_code} - {response.text}")
            raise TransportFailure(f"API request failed with status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise TransportFailure(f"Invalid mentor API response: {e}") from e
        if not isinstance(data, dict):
            raise TransportFailure("Invalid mentor API response structure")

        return MentorReply(response=data.get("response") or "", fallback=bool(data.get("fallback")))
