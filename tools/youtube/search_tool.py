"""Tools for YouTube video search and same-channel listings."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from googleapiclient.errors import HttpError
from pydantic import BaseModel, Field

from config.settings import YOUTUBE_DEFAULT_MAX_RESULTS
from tools.captions.errors import ErrorKind
from tools.youtube.base import YouTubeTool, error_response, text_response
from tools.youtube.client import get_youtube_service, run_logged
from tools.youtube.details_tool import fetch_video_item

logger = logging.getLogger(__name__)

RELATED_VIDEOS_NOTE = (
    "Showing other videos from the same channel "
    "(YouTube API doesn't provide true 'related videos')"
)


class SearchVideosInput(BaseModel):
    query: str = Field(..., description="Search query.")
    max_results: int = Field(
        YOUTUBE_DEFAULT_MAX_RESULTS,
        description="Maximum number of results (1 to 50, default 10).",
    )


class RelatedVideosInput(BaseModel):
    video_id: str = Field(..., description="YouTube video ID.")
    max_results: int = Field(
        YOUTUBE_DEFAULT_MAX_RESULTS,
        description="Maximum number of related videos (1 to 50, default 10).",
    )


def _clamp(max_results: int) -> int:
    return max(1, min(50, max_results))


def _simplify_search_item(item: Dict[str, Any]) -> Dict[str, Any]:
    snippet = item.get("snippet", {})
    return {
        "videoId": item.get("id", {}).get("videoId"),
        "title": snippet.get("title"),
        "channelTitle": snippet.get("channelTitle"),
        "publishedAt": snippet.get("publishedAt"),
        "description": snippet.get("description"),
    }


class SearchVideosTool(YouTubeTool):
    """Tool to search videos by free text. COST: 100 quota units."""

    NAME = "search_videos"
    DESCRIPTION = (
        "Search for videos on YouTube. "
        "This call costs approximately 100 quota units; use sparingly."
    )
    INPUT_MODEL = SearchVideosInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(
            query=args["query"],
            max_results=args.get("max_results") or YOUTUBE_DEFAULT_MAX_RESULTS,
        )

    def __call__(self, query: str, max_results: int = YOUTUBE_DEFAULT_MAX_RESULTS) -> Dict[str, Any]:
        try:
            service = get_youtube_service()
            request = service.search().list(
                part="snippet",
                q=query,
                type="video",
                maxResults=_clamp(max_results),
            )
            response = run_logged(request, label="search")
            items: List[Dict[str, Any]] = response.get("items", [])
            return text_response([_simplify_search_item(item) for item in items])
        except HttpError as http_err:
            logger.exception("YouTube API error when searching for %r", query)
            return error_response(f"YouTube API error: {http_err}", query=query)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when searching for %r", query)
            return error_response(f"Error searching videos: {exc}", query=query)


class GetRelatedVideosTool(YouTubeTool):
    """Tool to list recent uploads of the same channel. COST: ~101 quota units."""

    NAME = "get_related_videos"
    DESCRIPTION = (
        "Get videos related to a specific video (latest uploads from the same channel). "
        "This call costs approximately 101 quota units."
    )
    INPUT_MODEL = RelatedVideosInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(
            video_id=args["video_id"],
            max_results=args.get("max_results") or YOUTUBE_DEFAULT_MAX_RESULTS,
        )

    def __call__(self, video_id: str, max_results: int = YOUTUBE_DEFAULT_MAX_RESULTS) -> Dict[str, Any]:
        try:
            video = fetch_video_item(video_id, "snippet", label="related source video")
            if video is None:
                return error_response("Video not found", ErrorKind.NOT_FOUND, videoId=video_id)
            channel_id = video.get("snippet", {}).get("channelId")
            if not channel_id:
                return error_response(
                    "Channel ID not found for video", ErrorKind.NOT_FOUND, videoId=video_id
                )

            limit = _clamp(max_results)
            service = get_youtube_service()
            # One extra result because the source video is usually in the listing.
            request = service.search().list(
                part="snippet",
                channelId=channel_id,
                type="video",
                maxResults=min(50, limit + 1),
                order="date",
            )
            response = run_logged(request, label="related videos")
            items: List[Dict[str, Any]] = response.get("items", [])
            videos = [
                _simplify_search_item(item)
                for item in items
                if item.get("id", {}).get("videoId") != video_id
            ][:limit]
            return text_response({"note": RELATED_VIDEOS_NOTE, "videos": videos})
        except HttpError as http_err:
            logger.exception("YouTube API error when fetching related videos for %s", video_id)
            return error_response(f"YouTube API error: {http_err}", videoId=video_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when fetching related videos for %s", video_id)
            return error_response(f"Error getting related videos: {exc}", videoId=video_id)


__all__ = [
    "RELATED_VIDEOS_NOTE",
    "RelatedVideosInput",
    "SearchVideosInput",
    "GetRelatedVideosTool",
    "SearchVideosTool",
]
