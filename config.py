# config.py
import os
from dotenv import load_dotenv
import google.generativeai as genai

load_dotenv()


GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")  # Configurable via env

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows every origin
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Where MentorApiClient sends /api/chat requests
MINDMATE_API_URL = os.getenv("MINDMATE_API_URL", f"http://localhost:{PORT}")
_timeout = os.getenv("MENTOR_API_TIMEOUT")
MENTOR_API_TIMEOUT = float(_timeout) if _timeout else None

# Live quiz/chat sessions kept in memory; least recently used are dropped first
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))

# /api/health reports "waking_up" below this uptime
FRESH_START_SECONDS = 120

if GEMINI_API_KEY:
    genai.configure(api_key=GEMINI_API_KEY)
