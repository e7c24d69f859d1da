"""Tools for fetching video and channel metadata from YouTube."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from googleapiclient.errors import HttpError
from pydantic import BaseModel, Field

from tools.captions.errors import ErrorKind
from tools.youtube.base import YouTubeTool, error_response, text_response
from tools.youtube.client import get_youtube_service, run_logged

logger = logging.getLogger(__name__)


class VideoIdInput(BaseModel):
    video_id: str = Field(..., description="YouTube video ID.")


class ChannelIdInput(BaseModel):
    channel_id: str = Field(..., description="YouTube channel ID.")


def fetch_video_item(video_id: str, part: str, *, label: str) -> Optional[Dict[str, Any]]:
    """Return the first `videos.list` item for a video, or None when it does not exist."""
    service = get_youtube_service()
    request = service.videos().list(part=part, id=video_id)
    response = run_logged(request, label=label)
    items: List[Dict[str, Any]] = response.get("items", [])
    return items[0] if items else None


class GetVideoMetaTool(YouTubeTool):
    """Tool to get video title, description and statistics. COST: 1 quota unit."""

    NAME = "get_video_meta"
    DESCRIPTION = "Get video metadata (title, description, channel, view/like/comment counts) from the YouTube API."
    INPUT_MODEL = VideoIdInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(video_id=args["video_id"])

    def __call__(self, video_id: str) -> Dict[str, Any]:
        try:
            video = fetch_video_item(video_id, "snippet,statistics", label="video meta")
            if video is None:
                return error_response("Video not found", ErrorKind.NOT_FOUND, videoId=video_id)
            snippet = video.get("snippet", {})
            statistics = video.get("statistics", {})
            return text_response(
                {
                    "title": snippet.get("title"),
                    "description": snippet.get("description"),
                    "publishedAt": snippet.get("publishedAt"),
                    "channelId": snippet.get("channelId"),
                    "channelTitle": snippet.get("channelTitle"),
                    "viewCount": statistics.get("viewCount"),
                    "likeCount": statistics.get("likeCount"),
                    "commentCount": statistics.get("commentCount"),
                }
            )
        except HttpError as http_err:
            logger.exception("YouTube API error when fetching metadata for %s", video_id)
            return error_response(f"YouTube API error: {http_err}", videoId=video_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when fetching metadata for %s", video_id)
            return error_response(f"Error getting video meta: {exc}", videoId=video_id)


class GetVideoThumbnailsTool(YouTubeTool):
    """Tool to list thumbnail URLs for a video. COST: 1 quota unit."""

    NAME = "get_video_thumbnails"
    DESCRIPTION = "Get thumbnail information (URLs and sizes) for a video."
    INPUT_MODEL = VideoIdInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(video_id=args["video_id"])

    def __call__(self, video_id: str) -> Dict[str, Any]:
        try:
            video = fetch_video_item(video_id, "snippet", label="video thumbnails")
            if video is None:
                return error_response("Video not found", ErrorKind.NOT_FOUND, videoId=video_id)
            return text_response(
                {
                    "videoId": video_id,
                    "thumbnails": video.get("snippet", {}).get("thumbnails"),
                }
            )
        except HttpError as http_err:
            logger.exception("YouTube API error when fetching thumbnails for %s", video_id)
            return error_response(f"YouTube API error: {http_err}", videoId=video_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when fetching thumbnails for %s", video_id)
            return error_response(f"Error getting video thumbnails: {exc}", videoId=video_id)


class GetChannelInfoTool(YouTubeTool):
    """Tool to get channel description and statistics. COST: 1 quota unit."""

    NAME = "get_channel_info"
    DESCRIPTION = "Get information (title, description, subscriber/video/view counts) about a YouTube channel."
    INPUT_MODEL = ChannelIdInput

    async def run_async(self, *, args: dict[str, Any], tool_context) -> Dict[str, Any]:
        return self(channel_id=args["channel_id"])

    def __call__(self, channel_id: str) -> Dict[str, Any]:
        try:
            service = get_youtube_service()
            request = service.channels().list(part="snippet,statistics", id=channel_id)
            response = run_logged(request, label="channel info")
            items: List[Dict[str, Any]] = response.get("items", [])
            if not items:
                return error_response(
                    "Channel not found", ErrorKind.NOT_FOUND, channelId=channel_id
                )
            snippet = items[0].get("snippet", {})
            statistics = items[0].get("statistics", {})
            return text_response(
                {
                    "title": snippet.get("title"),
                    "description": snippet.get("description"),
                    "publishedAt": snippet.get("publishedAt"),
                    "subscriberCount": statistics.get("subscriberCount"),
                    "videoCount": statistics.get("videoCount"),
                    "viewCount": statistics.get("viewCount"),
                }
            )
        except HttpError as http_err:
            logger.exception("YouTube API error when fetching channel %s", channel_id)
            return error_response(f"YouTube API error: {http_err}", channelId=channel_id)
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error when fetching channel %s", channel_id)
            return error_response(f"Error getting channel info: {exc}", channelId=channel_id)


__all__ = [
    "ChannelIdInput",
    "VideoIdInput",
    "GetChannelInfoTool",
    "GetVideoMetaTool",
    "GetVideoThumbnailsTool",
    "fetch_video_item",
]
