# agents/roadmap.py
import logging
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.mentor_client import Mentor, TransportFailure
from utils.json_utils import try_parse_structured
from utils.text_format import to_bullets

logger = logging.getLogger(__name__)

NOT_SPECIFIED = "Not specified"
DEFAULT_TARGET_ROLE = "Your Target Role"
ROADMAP_UNAVAILABLE_MESSAGE = "Could not generate roadmap. Please try again."

ROADMAP_SYSTEM_PROMPT = "Return valid JSON only. No preamble. No backticks. Follow the provided schema exactly."
ROADMAP_MAX_TOKENS = 400
ROADMAP_TEMPERATURE = 0.35

# (answer key, label shown to the model), in prompt order
ANSWER_FIELDS = [
    ("goal", "Goal"),
    ("strength", "Strength"),
    ("constraint", "Constraint"),
    ("learningStyle", "Learning style"),
    ("weeklyTime", "Weekly time"),
    ("domain", "Domain interest"),
]

FALLBACK_ROADMAP = [
    "• Clarify one career goal for this month",
    "• Learn 1 core skill (NPTEL/SWAYAM/YouTube)",
    "• Build 1 mini project to practice",
    "• Create a simple portfolio (GitHub/Google Drive)",
    "• Connect with 2 professionals on LinkedIn",
    "• Review progress weekly",
]


def build_roadmap_prompt(answers: Mapping[str, str]) -> str:
    answers = answers or {}
    constraint_lines = [
        f"- {label}: {answers.get(key) or NOT_SPECIFIED}" for key, label in ANSWER_FIELDS
    ]
    return "\n".join([
        "Create a JSON-only roadmap (no prose, no markdown) following this schema:",
        "{",
        '  "targetRole": string,',
        '  "skills": string[],',
        '  "resources": string[],',
        '  "projects": string[],',
        '  "timeline": { "weeks1to4": string[], "weeks5to8": string[] },',
        '  "next7Days": string[]',
        "}",
        "",
        "Context: Indian student, rural/low-income; prioritize free resources and low-spec devices.",
        "Constraints:",
        *constraint_lines,
        "Guidelines:",
        "- Use specific, actionable bullets (Indian/low-cost resources preferred).",
        "- Keep items short; avoid generic advice.",
    ])


def _as_items(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else str(item) for item in value]


class RoadmapTimeline(BaseModel):
    weeks1to4: List[str] = []
    weeks5to8: List[str] = []

    @field_validator("weeks1to4", "weeks5to8", mode="before")
    @classmethod
    def _lenient_list(cls, value):
        return _as_items(value)


class RoadmapPlan(BaseModel):
    """Roadmap as returned by the model. Malformed fields fall back to empty."""
    model_config = ConfigDict(extra="ignore")

    targetRole: Optional[str] = None
    skills: List[str] = []
    resources: List[str] = []
    projects: List[str] = []
    timeline: RoadmapTimeline = Field(default_factory=RoadmapTimeline)
    next7Days: List[str] = []

    @field_validator("targetRole", mode="before")
    @classmethod
    def _lenient_role(cls, value):
        return value if isinstance(value, str) and value else None

    @field_validator("skills", "resources", "projects", "next7Days", mode="before")
    @classmethod
    def _lenient_list(cls, value):
        return _as_items(value)

    @field_validator("timeline", mode="before")
    @classmethod
    def _lenient_timeline(cls, value):
        return value if isinstance(value, (dict, RoadmapTimeline)) else {}

    @classmethod
    def from_raw(cls, data: Any) -> "RoadmapPlan":
        return cls.model_validate(data if isinstance(data, dict) else {})


# Display model: three cards side by side

class PlanSummaryPanel(BaseModel):
    title: str
    badge: str = "Personalized Plan"
    skills: List[str] = []
    resources: List[str] = []
    projects: List[str] = []


class TimelinePanel(BaseModel):
    title: str = "Timeline"
    badge: str = "Weeks"
    weeks_1_to_4: List[str] = []
    weeks_5_to_8: List[str] = []


class NextStepsPanel(BaseModel):
    title: str = "Next 7 Days"
    badge: str = "Action Items"
    items: List[str] = []


class RoadmapDisplay(BaseModel):
    summary: PlanSummaryPanel
    timeline: TimelinePanel
    next_7_days: NextStepsPanel


def render_roadmap(plan: Optional[RoadmapPlan], fallback_answers: Mapping[str, str]) -> Optional[RoadmapDisplay]:
    """Map a parsed plan to display panels. None means the caller shows bulleted text instead."""
    if plan is None:
        return None
    fallback_answers = fallback_answers or {}
    title = plan.targetRole or fallback_answers.get("careerTrack") or DEFAULT_TARGET_ROLE
    return RoadmapDisplay(
        summary=PlanSummaryPanel(
            title=title,
            skills=plan.skills,
            resources=plan.resources,
            projects=plan.projects,
        ),
        timeline=TimelinePanel(
            weeks_1_to_4=plan.timeline.weeks1to4,
            weeks_5_to_8=plan.timeline.weeks5to8,
        ),
        next_7_days=NextStepsPanel(items=plan.next7Days),
    )


# Outcome of one roadmap request

class Structured(BaseModel):
    kind: Literal["structured"] = "structured"
    plan: Dict[str, Any]


class Unstructured(BaseModel):
    kind: Literal["unstructured"] = "unstructured"
    text: str = ""


class Failed(BaseModel):
    kind: Literal["failed"] = "failed"
    reason: str = ""


RoadmapOutcome = Union[Structured, Unstructured, Failed]


class RoadmapView(BaseModel):
    kind: Literal["structured", "text"]
    display: Optional[RoadmapDisplay] = None
    text: Optional[str] = None
    used_fallback: bool = False


async def generate_roadmap(answers: Mapping[str, str], mentor: Mentor) -> RoadmapOutcome:
    prompt = build_roadmap_prompt(answers)
    try:
        reply = await mentor.send(
            ROADMAP_SYSTEM_PROMPT,
            prompt,
            max_tokens=ROADMAP_MAX_TOKENS,
            temperature=ROADMAP_TEMPERATURE,
        )
    except TransportFailure as e:
        logger.warning(f"Roadmap request failed, using fallback plan: {e}")
        return Failed(reason=str(e))

    if reply.fallback:
        # Canned chat reply, not a roadmap
        logger.warning("Roadmap request answered with fallback text, using fallback plan")
        return Failed(reason="fallback")

    logger.info(f"Roadmap generation: {len(reply.response)} chars")
    parsed = try_parse_structured(reply.response)
    if parsed is None:
        return Unstructured(text=reply.response)
    return Structured(plan=parsed)


def present_outcome(outcome: RoadmapOutcome, answers: Mapping[str, str]) -> RoadmapView:
    if isinstance(outcome, Structured):
        display = render_roadmap(RoadmapPlan.from_raw(outcome.plan), answers)
        return RoadmapView(kind="structured", display=display)
    if isinstance(outcome, Unstructured):
        return RoadmapView(kind="text", text=to_bullets(outcome.text) or ROADMAP_UNAVAILABLE_MESSAGE)
    return RoadmapView(kind="text", text="\n".join(FALLBACK_ROADMAP), used_fallback=True)
