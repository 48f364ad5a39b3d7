# models/request_models.py
from pydantic import BaseModel, Field
from typing import List, Optional


class ChatMessage(BaseModel):
    role: str = "user"
    content: str = ""


class ChatRequest(BaseModel):
    provider: Optional[str] = "gemini"
    model: Optional[str] = None
    messages: List[ChatMessage] = Field(default_factory=list)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None


class ChatResponse(BaseModel):
    response: str
    fallback: Optional[bool] = None


class OptionSelection(BaseModel):
    key: str = Field(..., min_length=1)
    option_index: int


class MentorMessage(BaseModel):
    message: str = ""
