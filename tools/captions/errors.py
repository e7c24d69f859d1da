"""Error kinds and exceptions raised inside the caption pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported back to the calling agent."""

    NOT_FOUND = "not_found"
    CAPTIONS_UNAVAILABLE = "captions_unavailable"
    EXTERNAL_TOOL_FAILURE = "external_tool_failure"
    ARTIFACT_MISSING = "artifact_missing"


class CaptionPipelineError(Exception):
    """Base class for recoverable failures in the extraction pipeline."""

    kind: ErrorKind = ErrorKind.EXTERNAL_TOOL_FAILURE

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ExternalToolError(CaptionPipelineError):
    """yt-dlp could not be launched or exited with a non-zero status."""

    kind = ErrorKind.EXTERNAL_TOOL_FAILURE


class ArtifactMissingError(CaptionPipelineError):
    """No subtitle file was found after a successful download."""

    kind = ErrorKind.ARTIFACT_MISSING


__all__ = [
    "ErrorKind",
    "CaptionPipelineError",
    "ExternalToolError",
    "ArtifactMissingError",
]
