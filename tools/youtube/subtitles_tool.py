"""Tool exposing the yt-dlp subtitle extraction pipeline."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from config.settings import SUBTITLE_DEFAULT_LANGUAGE, SUBTITLE_TEMP_DIR, YTDLP_BINARY
from tools.captions.extraction import extract_transcript
from tools.captions.ytdlp import YtDlpRunner
from tools.youtube.base import YouTubeTool, error_response, text_response

logger = logging.getLogger(__name__)


class SubtitlesInput(BaseModel):
    video_id: str = Field(..., description="YouTube video ID.")
    language: str = Field(
        SUBTITLE_DEFAULT_LANGUAGE,
        description="Language code (default: en).",
    )
    save_to_file: bool = Field(
        False,
        description="Also return the transcript as WebVTT content with a suggested file name.",
    )


class GetSubtitlesTool(YouTubeTool):
    """Fetch a caption track with yt-dlp and return it as timed cues. COST: 0 quota."""

    NAME = "get_subtitles"
    DESCRIPTION = (
        "Get video subtitles using yt-dlp. Returns timed transcript cues, or the list of "
        "available caption languages when the requested one does not exist. "
        "Does not consume YouTube API quota."
    )
    INPUT_MODEL = SubtitlesInput

    def __init__(
        self,
        runner: Optional[YtDlpRunner] = None,
        temp_dir: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._runner = runner or YtDlpRunner(YTDLP_BINARY)
        self._temp_dir = temp_dir or SUBTITLE_TEMP_DIR

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return await self(
            video_id=args["video_id"],
            language=args.get("language") or SUBTITLE_DEFAULT_LANGUAGE,
            save_to_file=bool(args.get("save_to_file", False)),
        )

    async def __call__(
        self,
        video_id: str,
        language: str = SUBTITLE_DEFAULT_LANGUAGE,
        save_to_file: bool = False,
    ) -> Dict[str, Any]:
        if not video_id:
            raise ValueError("video_id is required")
        try:
            result = await extract_transcript(
                video_id,
                language,
                save_to_file,
                runner=self._runner,
                temp_dir=self._temp_dir,
            )
            return text_response(result.to_payload())
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when extracting subtitles for %s", video_id)
            return error_response(
                f"Error getting subtitles: {exc}",
                videoId=video_id,
                language=language,
            )


__all__ = ["SubtitlesInput", "GetSubtitlesTool"]
