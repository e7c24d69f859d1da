"""YouTube Data API client utilities."""

from __future__ import annotations

import errno
import logging
import time
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from googleapiclient.discovery import build

from config.settings import YOUTUBE_API_KEY

logger = logging.getLogger(__name__)

_youtube_service = None


def get_youtube_service():
    """Create or reuse a YouTube Data API service client."""
    global _youtube_service  # noqa: PLW0603
    if _youtube_service is None:
        if not YOUTUBE_API_KEY:
            raise ValueError("YOUTUBE_API_KEY environment variable is required.")
        _youtube_service = build(
            "youtube",
            "v3",
            developerKey=YOUTUBE_API_KEY,
            cache_discovery=False,
        )
    return _youtube_service


def execute_request(request, *, retries: int = 1, label: str = "request"):
    """
    Execute a Google API request with basic retries.

    Timeouts and `EADDRNOTAVAIL` socket errors (local socket pool momentarily
    exhausted) are retried with a short backoff; anything else is raised.
    """
    last_exc: Optional[Exception] = None
    attempts = max(0, retries) + 1
    for attempt in range(1, attempts + 1):
        try:
            return request.execute(num_retries=0)
        except TimeoutError as exc:
            last_exc = exc
            if attempt < attempts:
                logger.warning(
                    "YouTube API %s timeout (attempt %s/%s), retrying...",
                    label,
                    attempt,
                    attempts,
                )
                continue
            raise
        except OSError as exc:
            last_exc = exc
            is_addr_unavailable = getattr(exc, "errno", None) == errno.EADDRNOTAVAIL
            if is_addr_unavailable and attempt < attempts:
                backoff = 0.5 * attempt
                logger.warning(
                    "YouTube API %s socket error (%s) attempt %s/%s, retrying in %.1fs",
                    label,
                    exc,
                    attempt,
                    attempts,
                    backoff,
                )
                time.sleep(backoff)
                continue
            raise
    if last_exc:
        raise last_exc
    raise RuntimeError("Failed to execute request for unknown reasons.")


def redact_request_uri(request) -> Optional[str]:
    """Return a sanitized request URI without the API key."""
    try:
        uri = getattr(request, "uri", None)
        if not uri:
            return None
        parts = urlsplit(uri)
        filtered_query = [
            (k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k != "key"
        ]
        return urlunsplit(
            (
                parts.scheme,
                parts.netloc,
                parts.path,
                urlencode(filtered_query),
                parts.fragment,
            )
        )
    except Exception as exc:  # noqa: BLE001
        logger.debug("Failed to redact request URI: %s", exc)
        return None


def run_logged(request, *, label: str, retries: int = 2):
    """Log the sanitized request URI, then execute it."""
    sanitized_uri = redact_request_uri(request)
    if sanitized_uri:
        logger.info("YouTube API request (%s): %s", label, sanitized_uri)
    return execute_request(request, retries=retries, label=label)


__all__ = [
    "execute_request",
    "get_youtube_service",
    "redact_request_uri",
    "run_logged",
]
