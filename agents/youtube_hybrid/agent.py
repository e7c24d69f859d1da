"""ADK app definition for the YouTube hybrid assistant."""

from __future__ import annotations

import sys
from pathlib import Path

from google.adk.agents.llm_agent import LlmAgent
from google.adk.apps.app import App

# Ensure we can import from the project root
project_root = Path(__file__).resolve().parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from agents.prompts import YOUTUBE_HYBRID_SYSTEM_PROMPT
from agents.tools_config import YOUTUBE_TOOLS
from config.settings import ADK_APP_NAME, DEFAULT_GEMINI_MODEL

MODEL_NAME = DEFAULT_GEMINI_MODEL

root_agent = LlmAgent(
    name="youtube_hybrid",
    model=MODEL_NAME,
    instruction=YOUTUBE_HYBRID_SYSTEM_PROMPT,
    tools=YOUTUBE_TOOLS,
)

app = App(
    name=ADK_APP_NAME,
    root_agent=root_agent,
)

__all__ = ["app", "root_agent"]
