"""Caption availability, download and WebVTT transcript handling."""

from .catalog import parse_caption_listing
from .errors import ErrorKind
from .extraction import extract_transcript, resolve_artifact
from .models import (
    Available,
    CaptionCatalog,
    Cue,
    ExtractionResult,
    Failed,
    SerializedArtifact,
    Unavailable,
)
from .time_codec import format_timestamp, format_vtt_timestamp, parse_timestamp
from .vtt import parse_vtt, serialize_vtt
from .ytdlp import ProcessResult, YtDlpRunner

__all__ = [
    "Available",
    "CaptionCatalog",
    "Cue",
    "ErrorKind",
    "ExtractionResult",
    "Failed",
    "ProcessResult",
    "SerializedArtifact",
    "Unavailable",
    "YtDlpRunner",
    "extract_transcript",
    "format_timestamp",
    "format_vtt_timestamp",
    "parse_caption_listing",
    "parse_timestamp",
    "parse_vtt",
    "resolve_artifact",
    "serialize_vtt",
]
