# orchestrator.py
import uuid
import logging
from collections import OrderedDict
from typing import Optional

import config
from agents import quiz_engine
from agents.roadmap import generate_roadmap, present_outcome
from models.context import MentorContext
from services.mentor_client import LocalMentor, Mentor

logger = logging.getLogger(__name__)

# One context per browser page session; nothing is persisted.
# Ordered oldest-used first, capped at config.MAX_SESSIONS.
_sessions: "OrderedDict[str, MentorContext]" = OrderedDict()
_mentor: Mentor = LocalMentor()


def set_mentor(mentor: Mentor) -> None:
    global _mentor
    _mentor = mentor


def get_context(session_id: str) -> Optional[MentorContext]:
    context = _sessions.get(session_id)
    if context is not None:
        _sessions.move_to_end(session_id)
    return context


def _evict_idle_sessions() -> None:
    while len(_sessions) > max(config.MAX_SESSIONS, 1):
        session_id, _ = _sessions.popitem(last=False)
        logger.info(f"Evicted idle session {session_id}")


def public_view(context: MentorContext) -> dict:
    quiz = context.quiz
    return {
        "session_id": context.session_id,
        "stage": "complete" if quiz.completed else "asking",
        "question": None if quiz.completed else quiz_engine.current_question(quiz).model_dump(),
        "roadmap": context.roadmap.model_dump() if context.roadmap else None,
        "chat": [t.model_dump() for t in context.chat.turns],
    }


def start_quiz() -> dict:
    session_id = str(uuid.uuid4())
    context = MentorContext(session_id=session_id, quiz=quiz_engine.start())
    _sessions[session_id] = context
    _evict_idle_sessions()
    logger.info(f"Started quiz session {session_id}")
    return public_view(context)


def restart_quiz(session_id: str) -> Optional[dict]:
    context = get_context(session_id)
    if not context:
        return None
    context.quiz = quiz_engine.start()
    context.roadmap = None
    return public_view(context)


def select_option(session_id: str, key: str, option_index: int) -> Optional[dict]:
    context = get_context(session_id)
    if not context:
        return None
    context.quiz = quiz_engine.select_option(context.quiz, key, option_index)
    return public_view(context)


def previous_question(session_id: str) -> Optional[dict]:
    context = get_context(session_id)
    if not context:
        return None
    context.quiz = quiz_engine.retreat(context.quiz)
    return public_view(context)


async def next_question(session_id: str) -> Optional[dict]:
    context = get_context(session_id)
    if not context:
        return None

    before = context.quiz
    try:
        context.quiz = quiz_engine.advance(before)
    except quiz_engine.ValidationError as e:
        return {"error": str(e)}

    if context.quiz.completed and not before.completed:
        answers = dict(context.quiz.answers)
        context.roadmap_runs += 1
        run = context.roadmap_runs
        logger.info(f"Quiz complete for {session_id}, generating roadmap")
        outcome = await generate_roadmap(answers, _mentor)
        # A restart while the request was in flight starts a new run
        if run == context.roadmap_runs and context.quiz.completed:
            context.roadmap = present_outcome(outcome, answers)

    return public_view(context)


async def send_chat_message(session_id: str, message: str) -> Optional[dict]:
    context = get_context(session_id)
    if not context:
        return None
    await context.chat.send_user_message(message, _mentor)
    return public_view(context)
