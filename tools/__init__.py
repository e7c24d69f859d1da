"""Tool package exposing ADK tools for YouTube metadata and transcripts."""

from .youtube import (
    GetChannelInfoTool,
    GetCommentsTool,
    GetRelatedVideosTool,
    GetSubtitlesTool,
    GetVideoMetaTool,
    GetVideoThumbnailsTool,
    SearchVideosTool,
)

__all__ = [
    "GetChannelInfoTool",
    "GetCommentsTool",
    "GetRelatedVideosTool",
    "GetSubtitlesTool",
    "GetVideoMetaTool",
    "GetVideoThumbnailsTool",
    "SearchVideosTool",
]
