"""Centralized configuration and environment loading for the YouTube hybrid tools."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"

# Load environment variables from .env if present. Deployments that manage env
# vars externally keep working without the file.
try:
    if ENV_PATH.exists():
        load_dotenv(dotenv_path=ENV_PATH)
    else:
        load_dotenv()
except PermissionError:
    logger.warning(
        "Unable to read %s due to permissions. Using existing environment variables.",
        ENV_PATH,
    )

# --- API Keys ---
# Checked when the YouTube service is first built so caption tools work without it.
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")

# --- yt-dlp / subtitles ---
YTDLP_BINARY = os.getenv("YTDLP_BINARY", "yt-dlp")
SUBTITLE_TEMP_DIR = os.getenv("SUBTITLE_TEMP_DIR") or tempfile.gettempdir()
SUBTITLE_DEFAULT_LANGUAGE = os.getenv("SUBTITLE_DEFAULT_LANGUAGE", "en")

# --- Tool Defaults ---
YOUTUBE_DEFAULT_MAX_RESULTS = int(os.getenv("YOUTUBE_DEFAULT_MAX_RESULTS", "10"))
YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS = int(os.getenv("YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS", "10"))

# --- ADK server ---
ADK_APP_NAME = os.getenv("ADK_APP_NAME", "youtube-hybrid")
ADK_SERVER_HOST = os.getenv("ADK_SERVER_HOST", "0.0.0.0")
ADK_SERVER_PORT = int(os.getenv("ADK_SERVER_PORT", "8000"))
ADK_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ADK_ALLOW_ORIGINS", "").split(",")
    if origin.strip()
]

# --- Gemini model selection ---
GEMINI_MODEL_DEFAULT = os.getenv("GEMINI_MODEL_DEFAULT", "gemini-2.5-flash")
DEFAULT_GEMINI_MODEL = GEMINI_MODEL_DEFAULT

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
