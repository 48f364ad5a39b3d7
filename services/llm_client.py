# services/llm_client.py
import logging
from typing import Optional

import google.generativeai as genai
from pydantic import BaseModel

import config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

DEFAULT_MAX_TOKENS = 500
DEFAULT_TEMPERATURE = 0.3


class Completion(BaseModel):
    text: str
    used_fallback: bool = False


def fallback_reply(user_message: str = "") -> str:
    """Canned plan returned when the model cannot be reached."""
    subject = f' for: "{user_message}"' if user_message else ""
    header = f"Here’s a quick career plan{subject}:"
    return "\n".join([
        header,
        "• Clarify your 1 goal this month",
        "• Pick 1 skill to learn this week",
        "• Start 1 free course (NPTEL/SWAYAM/YouTube) today",
        "• Build 1 small project to practice",
        "• Network with 2 people in your field",
        "• Review progress every Sunday",
    ])


async def call_gemini(
    prompt: str,
    system_instruction: Optional[str] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
    model_name: Optional[str] = None,
) -> str:
    """
    Call Gemini and return the generated text.
    Raises ValueError on API failure for clear errors.
    """
    if not config.GEMINI_API_KEY:
        raise ValueError("Gemini API key not configured")

    model = genai.GenerativeModel(
        model_name or config.GEMINI_MODEL,
        system_instruction=system_instruction or None,
    )
    try:
        response = await model.generate_content_async(
            prompt,
            generation_config={
                "temperature": temperature,
                "max_output_tokens": max_tokens,
            },
        )
        text = response.text
    except ValueError as e:
        # response.text raises ValueError when the candidate was blocked or empty
        raise ValueError(f"Invalid Gemini response: {e}")
    except Exception as e:
        raise ValueError(f"Gemini API error: {e}")

    logger.info(f"Gemini call successful: {len(text)} chars generated")
    return text


async def complete(
    system_instruction: Optional[str],
    user_message: str,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
    model_name: Optional[str] = None,
) -> Completion:
    """
    Forward one message to the model. Never raises: any failure is logged
    and replaced with the canned fallback plan flagged used_fallback=True.
    """
    try:
        text = await call_gemini(
            user_message,
            system_instruction=system_instruction,
            max_tokens=max_tokens,
            temperature=temperature,
            model_name=model_name,
        )
        return Completion(text=text)
    except Exception as e:
        logger.error(f"AI API error: {e}")
        return Completion(text=fallback_reply(user_message), used_fallback=True)
