# utils/text_format.py
import re
from typing import Any

BULLET = "•"
MAX_BULLETS = 8

_LIST_LINE = re.compile(r"^(\s*[•\-\d]+[\)\.\-]?\s+\S)", re.MULTILINE)
_SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def normalize_text(text: str) -> str:
    text = re.sub(r"\r\n?", "\n", text)
    text = re.sub(r"\t+", " ", text)
    return text.strip()


def to_bullets(raw: Any) -> str:
    """
    Format free text from the model into at most 8 short bullets.
    Text that already looks like a list is returned as-is (after normalizing).
    """
    if not raw or not isinstance(raw, str):
        return ""
    normalized = normalize_text(raw)

    if _LIST_LINE.search(normalized):
        return normalized

    sentences = [s.strip() for s in _SENTENCE_BREAK.split(normalized)]
    sentences = [s for s in sentences if s][:MAX_BULLETS]

    if not sentences:
        return normalized
    return "\n".join(f"{BULLET} {s}" for s in sentences)
