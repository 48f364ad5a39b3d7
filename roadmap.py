# roadmap.py
from fastapi import APIRouter, HTTPException

import orchestrator
from agents.quiz_engine import QUIZ_QUESTIONS
from models.request_models import OptionSelection

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


def _found(result):
    if result is None:
        raise HTTPException(status_code=404, detail="Session not found")
    if "error" in result:
        raise HTTPException(status_code=400, detail=result["error"])
    return result


@router.get("/questions")
async def get_questions():
    """All quiz questions in display order"""
    return {
        "questions": [q.model_dump() for q in QUIZ_QUESTIONS],
        "total": len(QUIZ_QUESTIONS),
    }


@router.post("/start")
async def start_quiz():
    return orchestrator.start_quiz()


@router.get("/{session_id}")
async def get_session(session_id: str):
    context = orchestrator.get_context(session_id)
    if not context:
        raise HTTPException(status_code=404, detail="Session not found")
    return orchestrator.public_view(context)


@router.post("/{session_id}/select")
async def select_option(session_id: str, selection: OptionSelection):
    return _found(orchestrator.select_option(session_id, selection.key, selection.option_index))


@router.post("/{session_id}/next")
async def next_question(session_id: str):
    return _found(await orchestrator.next_question(session_id))


@router.post("/{session_id}/previous")
async def previous_question(session_id: str):
    return _found(orchestrator.previous_question(session_id))


@router.post("/{session_id}/restart")
async def restart_quiz(session_id: str):
    return _found(orchestrator.restart_quiz(session_id))
