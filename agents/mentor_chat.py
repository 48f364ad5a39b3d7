# agents/mentor_chat.py
import logging
from typing import List, Literal

from pydantic import BaseModel

from services.mentor_client import Mentor, TransportFailure
from utils.text_format import to_bullets

logger = logging.getLogger(__name__)

MENTOR_SYSTEM_PROMPT = "\n".join([
    "You are an empathetic Indian career mentor and wellness companion.",
    "Always be supportive, culturally aware, and cost-sensitive (rural/low-income context).",
    "Write crisp, specific bullets (3–6). Each bullet: action + resource/example + outcome.",
    "Prefer Indian/low-cost resources: NPTEL, SWAYAM, NSDC, free YouTube channels.",
    "Include a mini project idea when relevant. Avoid generic fluff. No long paragraphs.",
    "Keep each bullet under 18 words.",
])
CHAT_MAX_TOKENS = 220
CHAT_TEMPERATURE = 0.35

RETRY_MESSAGE = "Please try again in a moment. Meanwhile, ask for a roadmap or a 7‑day plan."
FALLBACK_NOTE = "(Note: Using a temporary response while AI service initializes.)"


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str = ""
    pending: bool = False


class ChatSession(BaseModel):
    """Append-only transcript for one page session. Pending turns are typing placeholders."""
    turns: List[ChatTurn] = []

    @property
    def transcript(self) -> List[ChatTurn]:
        return [t for t in self.turns if not t.pending]

    @property
    def is_waiting(self) -> bool:
        return any(t.pending for t in self.turns)

    def _append(self, role: str, content: str) -> ChatTurn:
        turn = ChatTurn(role=role, content=content)
        self.turns.append(turn)
        return turn

    def _drop(self, placeholder: ChatTurn) -> None:
        # Identity, not equality: concurrent sends have identical placeholders
        self.turns = [t for t in self.turns if t is not placeholder]

    async def send_user_message(self, text: str, mentor: Mentor) -> None:
        message = (text or "").strip()
        if not message:
            return

        self._append("user", message)
        placeholder = ChatTurn(role="assistant", pending=True)
        self.turns.append(placeholder)

        try:
            reply = await mentor.send(
                MENTOR_SYSTEM_PROMPT,
                message,
                max_tokens=CHAT_MAX_TOKENS,
                temperature=CHAT_TEMPERATURE,
            )
        except TransportFailure as e:
            logger.error(f"Error calling AI API: {e}")
            self._drop(placeholder)
            self._append("assistant", RETRY_MESSAGE)
            return

        self._drop(placeholder)
        self._append("assistant", to_bullets(reply.response))
        if reply.fallback:
            self._append("assistant", FALLBACK_NOTE)
