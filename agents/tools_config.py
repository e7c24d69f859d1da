"""Tool configuration for the YouTube hybrid agent."""

from tools.youtube import (
    GetChannelInfoTool,
    GetCommentsTool,
    GetRelatedVideosTool,
    GetSubtitlesTool,
    GetVideoMetaTool,
    GetVideoThumbnailsTool,
    SearchVideosTool,
)

YOUTUBE_TOOLS = [
    # Zero-quota transcript access first.
    GetSubtitlesTool(),
    GetVideoMetaTool(),
    GetVideoThumbnailsTool(),
    GetChannelInfoTool(),
    GetCommentsTool(),
    # Expensive search endpoints.
    SearchVideosTool(),
    GetRelatedVideosTool(),
]
