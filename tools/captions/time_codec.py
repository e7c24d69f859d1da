"""Conversions between caption timestamps and millisecond offsets."""

from __future__ import annotations

import math
from typing import Tuple


def _to_number(field: str, cast) -> float:
    try:
        number = cast(field.strip())
    except ValueError:
        return 0
    return number if math.isfinite(number) else 0


def parse_timestamp(value: str) -> int:
    """
    Parse ``HH:MM:SS.mmm`` or ``MM:SS.mmm`` into milliseconds.

    The rightmost field is seconds and may be fractional. Missing leading
    fields default to zero, and a field that is not numeric counts as zero so
    a single malformed timing line never aborts a whole transcript.
    """
    fields = value.split(":")
    seconds = _to_number(fields[-1], float)
    minutes = _to_number(fields[-2], int) if len(fields) >= 2 else 0
    hours = _to_number(fields[-3], int) if len(fields) >= 3 else 0
    return int(round((hours * 3600 + minutes * 60 + seconds) * 1000))


def _split(milliseconds: int) -> Tuple[int, int, int, int]:
    total_seconds = milliseconds // 1000
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60
    return hours, minutes, seconds, milliseconds % 1000


def format_timestamp(milliseconds: int) -> str:
    """Display format: ``MM:SS.mmm`` below one hour, ``HH:MM:SS.mmm`` otherwise."""
    hours, minutes, seconds, ms = _split(int(milliseconds))
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"
    return f"{minutes:02d}:{seconds:02d}.{ms:03d}"


def format_vtt_timestamp(milliseconds: int) -> str:
    """WebVTT cue timing format, always ``HH:MM:SS.mmm``."""
    hours, minutes, seconds, ms = _split(int(milliseconds))
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{ms:03d}"


__all__ = ["parse_timestamp", "format_timestamp", "format_vtt_timestamp"]
