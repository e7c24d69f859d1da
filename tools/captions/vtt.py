"""WebVTT parsing into cues and regeneration of WebVTT from cues."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from tools.captions.models import Cue
from tools.captions.time_codec import format_vtt_timestamp, parse_timestamp

TIMING_SEPARATOR = " --> "
VTT_HEADER = "WEBVTT"

_CUE_INDEX = re.compile(r"^\d+$")


class _OpenCue:
    """Cue under construction; becomes a ``Cue`` once the next boundary is seen."""

    def __init__(self, start_ms: int, end_ms: int) -> None:
        self.start_ms = start_ms
        self.end_ms = end_ms
        self.text = ""

    def close(self) -> Cue:
        return Cue(
            text=self.text,
            start_ms=self.start_ms,
            end_ms=self.end_ms,
            duration_ms=self.end_ms - self.start_ms,
        )


def _open_cue(timing_line: str) -> _OpenCue:
    start_raw, _, end_raw = timing_line.partition(TIMING_SEPARATOR)
    # Cue settings (``align:start position:0%``) may follow the end timestamp.
    end_tokens = end_raw.split()
    start_ms = max(0, parse_timestamp(start_raw.strip()))
    end_ms = parse_timestamp(end_tokens[0]) if end_tokens else 0
    return _OpenCue(start_ms, max(start_ms, end_ms))


def parse_vtt(payload: str) -> List[Cue]:
    """
    Parse a WebVTT document into cues in document order.

    Text lines of a cue are joined with single spaces; each line keeps one
    trailing space, which the response layer trims. A document without timing
    lines yields an empty list.
    """
    cues: List[Cue] = []
    current: Optional[_OpenCue] = None

    for line in payload.splitlines():
        if TIMING_SEPARATOR in line:
            if current is not None:
                cues.append(current.close())
            current = _open_cue(line)
        elif (
            current is not None
            and line.strip()
            and not line.startswith(VTT_HEADER)
            and not _CUE_INDEX.match(line)
        ):
            current.text += line + " "

    if current is not None:
        cues.append(current.close())
    return cues


def serialize_vtt(cues: Sequence[Cue]) -> str:
    """
    Render cues as a WebVTT document with numbered cues.

    Source line wrapping is not preserved (the parser already flattened it),
    but parsing this output and serializing again gives the same document.
    """
    parts = [f"{VTT_HEADER}\n\n"]
    for index, cue in enumerate(cues, start=1):
        parts.append(f"{index}\n")
        parts.append(
            f"{format_vtt_timestamp(cue.start_ms)}{TIMING_SEPARATOR}"
            f"{format_vtt_timestamp(cue.end_ms)}\n"
        )
        parts.append(f"{cue.text.strip()}\n\n")
    return "".join(parts)


__all__ = ["TIMING_SEPARATOR", "VTT_HEADER", "parse_vtt", "serialize_vtt"]
