"""Parse ``yt-dlp --list-subs`` output into a caption catalog."""

from __future__ import annotations

import logging
from typing import List, Optional

from tools.captions.models import CaptionCatalog

logger = logging.getLogger(__name__)

MANUAL_SECTION_HEADER = "Available subtitles"
AUTO_SECTION_HEADER = "Available automatic captions"

# First tokens of the column header row printed above each table.
_TABLE_HEADER_TOKENS = {"Language", "Name"}


def _first_token(line: str) -> Optional[str]:
    tokens = line.split()
    if not tokens or tokens[0] in _TABLE_HEADER_TOKENS:
        return None
    return tokens[0]


def parse_caption_listing(output: str, requested_language: str) -> CaptionCatalog:
    """
    Collect the language codes listed in the manual and automatic sections.

    Manual subtitle codes (an optional trailing colon is dropped) only count when
    they are exactly two characters long, so region-tagged manual tracks such as
    ``en-US`` are not recognized there. Automatic caption rows accept codes of
    two to five characters. Codes are kept in listing order, duplicates included.
    """
    available: List[str] = []
    in_manual = False
    in_auto = False

    for line in output.splitlines():
        if MANUAL_SECTION_HEADER in line:
            in_manual, in_auto = True, False
            continue
        if AUTO_SECTION_HEADER in line:
            in_manual, in_auto = False, True
            continue
        if not line.strip():
            in_manual = in_auto = False
            continue

        if in_manual:
            token = (_first_token(line) or "").rstrip(":")
            if len(token) == 2:
                available.append(token)
        elif in_auto:
            token = _first_token(line)
            if token and 2 <= len(token) <= 5:
                available.append(token)

    has_match = requested_language in available
    logger.debug(
        "Caption listing: %d language(s), requested %s matched=%s",
        len(available),
        requested_language,
        has_match,
    )
    return CaptionCatalog(
        requested_language=requested_language,
        has_match=has_match,
        available_languages=available,
    )


def empty_catalog(requested_language: str) -> CaptionCatalog:
    """Catalog used when the lister fails: nothing is available."""
    return CaptionCatalog(
        requested_language=requested_language,
        has_match=False,
        available_languages=[],
    )


__all__ = [
    "AUTO_SECTION_HEADER",
    "MANUAL_SECTION_HEADER",
    "empty_catalog",
    "parse_caption_listing",
]
