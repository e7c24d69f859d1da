"""Tool for fetching top-level YouTube video comments."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from googleapiclient.errors import HttpError
from pydantic import BaseModel, Field

from config.settings import YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS
from tools.youtube.base import YouTubeTool, error_response, text_response
from tools.youtube.client import get_youtube_service, run_logged

logger = logging.getLogger(__name__)


class CommentsInput(BaseModel):
    video_id: str = Field(..., description="YouTube video ID.")
    max_results: int = Field(
        YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS,
        description="Maximum number of comments (1 to 100, default 10).",
    )


def _simplify_comment(item: Dict[str, Any]) -> Dict[str, Any]:
    snippet = item.get("snippet", {}).get("topLevelComment", {}).get("snippet", {})
    return {
        "text": snippet.get("textDisplay"),
        "author": snippet.get("authorDisplayName"),
        "publishedAt": snippet.get("publishedAt"),
        "likeCount": snippet.get("likeCount"),
    }


class GetCommentsTool(YouTubeTool):
    """Tool to get top-level comments of a video. COST: 1 quota unit."""

    NAME = "get_comments"
    DESCRIPTION = "Get video comments (text, author, publish date, likes) from the YouTube API."
    INPUT_MODEL = CommentsInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(
            video_id=args["video_id"],
            max_results=args.get("max_results") or YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS,
        )

    def __call__(
        self,
        video_id: str,
        max_results: int = YOUTUBE_DEFAULT_COMMENT_MAX_RESULTS,
    ) -> Dict[str, Any]:
        try:
            service = get_youtube_service()
            request = service.commentThreads().list(
                part="snippet",
                videoId=video_id,
                maxResults=max(1, min(100, max_results)),
            )
            response = run_logged(request, label="comments")
            items: List[Dict[str, Any]] = response.get("items", [])
            return text_response([_simplify_comment(item) for item in items])
        except HttpError as http_err:
            logger.exception("YouTube API error when fetching comments for %s", video_id)
            return error_response(f"YouTube API error: {http_err}", videoId=video_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when fetching comments for %s", video_id)
            return error_response(f"Error getting comments: {exc}", videoId=video_id)


__all__ = ["CommentsInput", "GetCommentsTool"]
