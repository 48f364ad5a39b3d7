# main.py
import logging
import time
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from agents.journal import pick_journal_prompt
from chat import router as chat_router
from roadmap import router as quiz_router

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()

app = FastAPI(title="MindMate Career Mentor")

#CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(chat_router)
app.include_router(quiz_router)


# ---------------------------
# Health Check
# ---------------------------
@app.get("/api/health")
async def health():
    uptime = time.monotonic() - STARTED_AT
    fresh = uptime < config.FRESH_START_SECONDS
    return {
        "ok": True,
        "status": "waking_up" if fresh else "fully_awake",
        "hasGemini": bool(config.GEMINI_API_KEY),
        "uptime": uptime,
        "isFreshStart": fresh,
        "message": "Server just woke up from sleep mode" if fresh else "Server is fully operational",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/api/journal/prompt")
async def journal_prompt():
    return {"prompt": pick_journal_prompt()}


if __name__ == "__main__":
    logger.info(f"MindMate server running on http://{config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
