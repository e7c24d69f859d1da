"""Entry point for running the Google ADK FastAPI server for the YouTube hybrid tools."""

from __future__ import annotations

import logging
from pathlib import Path

import uvicorn
from google.adk.cli.fast_api import get_fast_api_app

from config.settings import ADK_ALLOW_ORIGINS, ADK_SERVER_HOST, ADK_SERVER_PORT, LOG_LEVEL

logger = logging.getLogger(__name__)

AGENTS_DIR = Path(__file__).resolve().parent / "agents"


def build_app():
    """Construct the FastAPI app backed by the ADK agent definition."""
    return get_fast_api_app(
        agents_dir=str(AGENTS_DIR),
        allow_origins=ADK_ALLOW_ORIGINS,
        web=False,
        host=ADK_SERVER_HOST,
        port=ADK_SERVER_PORT,
    )


def main() -> None:
    """Main entry point used by `python3 adk_server.py` and the `youtube-hybrid-server` script."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting ADK FastAPI server on %s:%s", ADK_SERVER_HOST, ADK_SERVER_PORT)
    app = build_app()
    uvicorn.run(app, host=ADK_SERVER_HOST, port=ADK_SERVER_PORT)


if __name__ == "__main__":
    main()
