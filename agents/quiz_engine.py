# agents/quiz_engine.py
"""
Career quiz state machine.

States are AskingQuestion(index) and Completed. QuizState is an immutable
value: every operation takes a state and returns a new one, so the host keeps
exactly one current state per session.
"""
import logging
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

SELECT_OPTION_PROMPT = "Please select an option before continuing."


class ValidationError(ValueError):
    """Raised when advancing past a question that has no answer."""


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    prompt: str
    options: Tuple[str, ...]


QUIZ_QUESTIONS: Tuple[Question, ...] = (
    Question(
        key="goal",
        prompt="What outcome do you want in the next 6–12 months?",
        options=(
            "Get my first job/internship",
            "Switch career/domain",
            "Strengthen fundamentals",
            "Prepare for higher studies",
        ),
    ),
    Question(
        key="strength",
        prompt="Which strength best describes you?",
        options=(
            "Logical problem-solving",
            "Communication and teaching",
            "Creative design and storytelling",
            "Hands-on building and tinkering",
        ),
    ),
    Question(
        key="constraint",
        prompt="What constraint should we respect?",
        options=(
            "Low budget—prefer free resources",
            "Limited laptop/internet",
            "Only 5–7 hours weekly",
            "Need quick results (under 8 weeks)",
        ),
    ),
    Question(
        key="learningStyle",
        prompt="How do you prefer to learn?",
        options=(
            "Video courses (NPTEL/SWAYAM/YouTube)",
            "Reading docs/books",
            "Project-first, learn by doing",
            "Mentorship/community support",
        ),
    ),
    Question(
        key="weeklyTime",
        prompt="How much time can you spend weekly?",
        options=(
            "3–5 hours",
            "6–9 hours",
            "10–14 hours",
            "15+ hours",
        ),
    ),
    Question(
        key="domain",
        prompt="Which domain interests you most?",
        options=(
            "Software Development / Web",
            "Data / AI / Analytics",
            "Design / UX",
            "Business / Marketing / Ops",
        ),
    ),
)


class QuizState(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = 0
    answers: Dict[str, str] = {}
    completed: bool = False

    @property
    def question(self) -> Question:
        return QUIZ_QUESTIONS[self.index]


class CurrentQuestion(BaseModel):
    """What the host UI needs to draw one quiz step. Options are bound by index."""
    key: str
    prompt: str
    options: List[str]
    number: int
    total: int
    progress_percent: float
    selected_index: Optional[int] = None
    can_go_back: bool = False
    is_last: bool = False


def start() -> QuizState:
    return QuizState()


def select_answer(state: QuizState, key: str, value: str) -> QuizState:
    # Clicks rendered for an earlier question must not overwrite anything
    if state.completed or key != state.question.key:
        logger.debug(f"Ignoring stale answer for '{key}' (current: '{state.question.key}')")
        return state
    return state.model_copy(update={"answers": {**state.answers, key: value}})


def select_option(state: QuizState, key: str, option_index: int) -> QuizState:
    options = state.question.options
    if not 0 <= option_index < len(options):
        return state
    return select_answer(state, key, options[option_index])


def advance(state: QuizState) -> QuizState:
    if state.completed:
        return state
    if not state.answers.get(state.question.key):
        raise ValidationError(SELECT_OPTION_PROMPT)
    if state.index == len(QUIZ_QUESTIONS) - 1:
        return state.model_copy(update={"completed": True})
    return state.model_copy(update={"index": state.index + 1})


def retreat(state: QuizState) -> QuizState:
    if state.completed or state.index == 0:
        return state
    return state.model_copy(update={"index": state.index - 1})


def current_question(state: QuizState) -> CurrentQuestion:
    question = state.question
    total = len(QUIZ_QUESTIONS)
    selected = state.answers.get(question.key)
    return CurrentQuestion(
        key=question.key,
        prompt=question.prompt,
        options=list(question.options),
        number=state.index + 1,
        total=total,
        progress_percent=(state.index + 1) / total * 100,
        selected_index=question.options.index(selected) if selected in question.options else None,
        can_go_back=state.index > 0,
        is_last=state.index == total - 1,
    )
