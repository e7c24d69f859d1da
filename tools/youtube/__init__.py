"""YouTube tooling package with shared helpers and ADK tool wrappers."""

from .base import YouTubeTool, error_response, text_response
from .client import execute_request, get_youtube_service, redact_request_uri
from .comments_tool import CommentsInput, GetCommentsTool
from .details_tool import (
    ChannelIdInput,
    GetChannelInfoTool,
    GetVideoMetaTool,
    GetVideoThumbnailsTool,
    VideoIdInput,
)
from .search_tool import (
    GetRelatedVideosTool,
    RelatedVideosInput,
    SearchVideosInput,
    SearchVideosTool,
)
from .subtitles_tool import GetSubtitlesTool, SubtitlesInput

__all__ = [
    "YouTubeTool",
    "error_response",
    "text_response",
    "execute_request",
    "get_youtube_service",
    "redact_request_uri",
    "CommentsInput",
    "GetCommentsTool",
    "ChannelIdInput",
    "VideoIdInput",
    "GetChannelInfoTool",
    "GetVideoMetaTool",
    "GetVideoThumbnailsTool",
    "RelatedVideosInput",
    "SearchVideosInput",
    "GetRelatedVideosTool",
    "SearchVideosTool",
    "SubtitlesInput",
    "GetSubtitlesTool",
]
