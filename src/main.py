"""
Porter2 Stemmer - FastAPI service exposing the English stemmer

Endpoints:
- GET  /          service info
- GET  /health    health check
- POST /v1/stem   stem a single word

One word per request: tokenization and batching are left to the caller.
"""

import logging
import os
from datetime import datetime
from pathlib import Path

# Load environment variables from .env.local (local dev) or .env (production)
from dotenv import load_dotenv

env_local = Path(__file__).parent.parent / ".env.local"
env_file = Path(__file__).parent.parent / ".env"

if env_local.exists():
    load_dotenv(env_local, override=True)
elif env_file.exists():
    load_dotenv(env_file, override=True)

# Configure logging: console (brief) + file (detailed)
from src.logging_config import setup_logging

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
console_level = getattr(logging, log_level, logging.INFO)
setup_logging(
    log_file=os.getenv("LOG_FILE", "logs/porter2.log"),
    console_level=console_level,
    file_level=logging.DEBUG  # Always DEBUG in file for troubleshooting
)

logger = logging.getLogger(__name__)


from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .porter2 import InvalidInputError, stem

PORT = int(os.getenv("PORT", "8080"))

# Version tracking
APP_VERSION = "0.1.0"
APP_START_TIME = datetime.utcnow().isoformat() + "Z"


app = FastAPI(
    title="Porter2 Stemmer API",
    description="English Porter2 (Snowball) stemmer built on table-driven suffix automata",
    version=APP_VERSION,
)


# Request/Response models
class HealthResponse(BaseModel):
    status: str
    version: str
    started_at: str
    uptime_seconds: float


class StemRequest(BaseModel):
    word: str = Field(..., description="Word to stem (empty is rejected with 400)")

    class Config:
        json_schema_extra = {
            "example": {
                "word": "generalization"
            }
        }


class StemResponse(BaseModel):
    word: str
    stem: str


# Routes
@app.get("/", response_model=dict)
async def root():
    """Root endpoint"""
    return {
        "service": "Porter2 Stemmer API",
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    start_time = datetime.fromisoformat(APP_START_TIME.rstrip('Z'))
    uptime = (datetime.utcnow() - start_time).total_seconds()

    return HealthResponse(
        status="healthy",
        version=APP_VERSION,
        started_at=APP_START_TIME,
        uptime_seconds=round(uptime, 2),
    )


@app.post("/v1/stem", response_model=StemResponse)
async def stem_word(request: StemRequest):
    """
    Stem a single word

    Example:
        POST /v1/stem
        {
            "word": "generalization"
        }
        → {"word": "generalization", "stem": "general"}
    """
    result = stem(request.word)
    logger.debug(f"Stemmed {request.word!r} → {result!r}")

    return StemResponse(word=request.word, stem=result)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request, exc: InvalidInputError):
    """Stemmer rejected the input"""
    logger.info(f"Invalid stemmer input: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid input",
            "detail": exc.message,
        },
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler"""
    logger.error(f"Unhandled error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "detail": str(exc),
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=PORT,
        reload=True,  # Development only
    )
