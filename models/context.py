# models/context.py
from pydantic import BaseModel, Field
from typing import Optional

from agents.mentor_chat import ChatSession
from agents.quiz_engine import QuizState
from agents.roadmap import RoadmapView


class MentorContext(BaseModel):
    session_id: str
    quiz: QuizState = Field(default_factory=QuizState)
    chat: ChatSession = Field(default_factory=ChatSession)
    roadmap: Optional[RoadmapView] = None
    roadmap_runs: int = 0
