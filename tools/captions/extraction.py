"""Subtitle extraction pipeline: catalog check, download, artifact lookup, parse."""

from __future__ import annotations

import logging
import tempfile
import time
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

from tools.captions.catalog import empty_catalog, parse_caption_listing
from tools.captions.errors import (
    ArtifactMissingError,
    CaptionPipelineError,
    ExternalToolError,
)
from tools.captions.models import (
    Available,
    CaptionCatalog,
    ExtractionResult,
    Failed,
    SerializedArtifact,
    Unavailable,
)
from tools.captions.vtt import parse_vtt, serialize_vtt
from tools.captions.ytdlp import YtDlpRunner

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
FALLBACK_ARTIFACT_SUFFIXES = (".en.vtt", ".vtt")


class ExtractionState(str, Enum):
    CHECKING_AVAILABILITY = "checking_availability"
    UNAVAILABLE = "unavailable"
    DOWNLOADING = "downloading"
    ARTIFACT_RESOLUTION = "artifact_resolution"
    PARSING = "parsing"
    DONE = "done"
    FAILED = "failed"


def candidate_suffixes(language: str) -> List[str]:
    """Suffixes yt-dlp may append to the output base, highest priority first."""
    return [f".{language}.vtt", *FALLBACK_ARTIFACT_SUFFIXES]


def build_temp_base(video_id: str, temp_dir: Optional[str] = None) -> str:
    directory = Path(temp_dir or tempfile.gettempdir())
    return str(directory / f"subs_{video_id}_{int(time.time() * 1000)}")


def resolve_artifact(base: str, suffixes: Sequence[str]) -> Optional[Path]:
    """Return the first ``base + suffix`` that exists and is non-empty."""
    for suffix in suffixes:
        candidate = Path(f"{base}{suffix}")
        try:
            if candidate.is_file() and candidate.stat().st_size > 0:
                return candidate
        except OSError:
            continue
    return None


def _enter(video_id: str, state: ExtractionState) -> ExtractionState:
    logger.debug("Subtitle extraction %s -> %s", video_id, state.value)
    return state


def _read_and_delete(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactMissingError(f"Failed to read subtitle file {path}: {exc}") from exc
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning("Could not remove temporary subtitle file %s", path)


async def check_availability(
    video_id: str, language: str, runner: YtDlpRunner
) -> CaptionCatalog:
    """List caption tracks; any lister failure means nothing is available."""
    try:
        result = await runner.list_subtitles(video_id)
    except ExternalToolError as exc:
        logger.warning("Caption listing for %s failed: %s", video_id, exc.reason)
        return empty_catalog(language)
    if not result.ok:
        return empty_catalog(language)
    return parse_caption_listing(result.stdout, language)


async def extract_transcript(
    video_id: str,
    language: str = DEFAULT_LANGUAGE,
    save_to_file: bool = False,
    *,
    runner: Optional[YtDlpRunner] = None,
    temp_dir: Optional[str] = None,
) -> ExtractionResult:
    """
    Fetch and parse the caption track for ``video_id`` in ``language``.

    Pipeline failures come back as ``Failed`` results; only a missing
    ``video_id`` raises.
    """
    if not video_id:
        raise ValueError("video_id is required")
    runner = runner or YtDlpRunner()

    state = _enter(video_id, ExtractionState.CHECKING_AVAILABILITY)
    catalog = await check_availability(video_id, language, runner)
    if not catalog.has_match:
        _enter(video_id, ExtractionState.UNAVAILABLE)
        logger.info(
            "No %s captions for %s (available: %s)",
            language,
            video_id,
            ", ".join(catalog.available_languages) or "none",
        )
        return Unavailable(
            video_id=video_id,
            requested_language=language,
            available_languages=catalog.available_languages,
        )

    try:
        state = _enter(video_id, ExtractionState.DOWNLOADING)
        base = build_temp_base(video_id, temp_dir)
        download = await runner.download_subtitles(video_id, language, base)
        if not download.ok:
            raise ExternalToolError(f"yt-dlp failed with code {download.returncode}")

        state = _enter(video_id, ExtractionState.ARTIFACT_RESOLUTION)
        artifact = resolve_artifact(base, candidate_suffixes(language))
        if artifact is None:
            raise ArtifactMissingError(
                f"Subtitle file not found after download (tried base: {base})"
            )
        payload = _read_and_delete(artifact)

        state = _enter(video_id, ExtractionState.PARSING)
        cues = parse_vtt(payload)
        regenerated = None
        if save_to_file:
            regenerated = SerializedArtifact(
                content=serialize_vtt(cues),
                file_name=f"{video_id}_{language}.vtt",
            )
    except CaptionPipelineError as exc:
        _enter(video_id, ExtractionState.FAILED)
        logger.warning(
            "Subtitle extraction for %s failed during %s: %s",
            video_id,
            state.value,
            exc.reason,
        )
        return Failed(
            video_id=video_id,
            requested_language=language,
            kind=exc.kind,
            reason=exc.reason,
        )

    _enter(video_id, ExtractionState.DONE)
    logger.info("Extracted %d cue(s) for %s [%s]", len(cues), video_id, language)
    return Available(
        video_id=video_id,
        requested_language=language,
        transcript=cues,
        regenerated=regenerated,
    )


__all__ = [
    "DEFAULT_LANGUAGE",
    "ExtractionState",
    "build_temp_base",
    "candidate_suffixes",
    "check_availability",
    "extract_transcript",
    "resolve_artifact",
]
