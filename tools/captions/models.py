"""Data models for caption catalogs, transcripts and extraction results."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from tools.captions.errors import ErrorKind
from tools.captions.time_codec import format_timestamp

NO_CAPTIONS_MESSAGE = (
    "No auto-generated subtitles available for this video. YouTube only generates "
    "subtitles for videos with sufficient spoken content."
)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CaptionCatalog(_FrozenModel):
    """Caption languages reported by ``yt-dlp --list-subs`` for one video."""

    requested_language: str = Field(description="Language code the caller asked for.")
    has_match: bool = Field(description="Whether the requested language was listed.")
    available_languages: List[str] = Field(
        default_factory=list,
        description="Language codes in listing order; duplicates are kept.",
    )


class Cue(_FrozenModel):
    """One timed text segment of a transcript."""

    text: str = Field(description="Cue text, source lines joined with single spaces.")
    start_ms: int = Field(ge=0, description="Start offset in milliseconds.")
    end_ms: int = Field(ge=0, description="End offset in milliseconds.")
    duration_ms: int = Field(ge=0, description="end_ms - start_ms.")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "text": self.text.strip(),
            "startMs": self.start_ms,
            "endMs": self.end_ms,
            "durationMs": self.duration_ms,
            "startTimeFormatted": format_timestamp(self.start_ms),
            "endTimeFormatted": format_timestamp(self.end_ms),
        }


class SerializedArtifact(_FrozenModel):
    """A regenerated WebVTT document offered to the caller for saving."""

    content: str
    file_name: str


class Unavailable(_FrozenModel):
    status: Literal["unavailable"] = "unavailable"
    video_id: str
    requested_language: str
    available_languages: List[str] = Field(default_factory=list)
    message: str = NO_CAPTIONS_MESSAGE

    def to_payload(self) -> Dict[str, Any]:
        return {
            "videoId": self.video_id,
            "language": self.requested_language,
            "available": False,
            "errorKind": ErrorKind.CAPTIONS_UNAVAILABLE.value,
            "message": self.message,
            "availableLanguages": list(self.available_languages),
        }


class Available(_FrozenModel):
    status: Literal["available"] = "available"
    video_id: str
    requested_language: str
    transcript: List[Cue] = Field(default_factory=list)
    regenerated: Optional[SerializedArtifact] = None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "videoId": self.video_id,
            "language": self.requested_language,
            "available": True,
            "transcript": [cue.to_payload() for cue in self.transcript],
        }
        if self.regenerated is not None:
            payload["vttContent"] = self.regenerated.content
            payload["fileName"] = self.regenerated.file_name
        return payload


class Failed(_FrozenModel):
    status: Literal["failed"] = "failed"
    video_id: str
    requested_language: str
    kind: ErrorKind
    reason: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "videoId": self.video_id,
            "language": self.requested_language,
            "available": False,
            "errorKind": self.kind.value,
            "reason": self.reason,
            "message": f"Error getting subtitles: {self.reason}",
        }


ExtractionResult = Union[Unavailable, Available, Failed]


__all__ = [
    "NO_CAPTIONS_MESSAGE",
    "CaptionCatalog",
    "Cue",
    "SerializedArtifact",
    "Unavailable",
    "Available",
    "Failed",
    "ExtractionResult",
]
