"""Async wrapper around the ``yt-dlp`` command line tool."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List

from tools.captions.errors import ExternalToolError

logger = logging.getLogger(__name__)

DEFAULT_YTDLP_BINARY = "yt-dlp"


def video_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


@dataclass(frozen=True)
class ProcessResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class YtDlpRunner:
    """
    Launches yt-dlp as a subprocess and waits for it without blocking the loop.

    No timeout is applied; a launched process runs until it exits. Launch
    failures (binary missing, permissions) raise ``ExternalToolError``.
    """

    def __init__(self, binary: str = DEFAULT_YTDLP_BINARY) -> None:
        self.binary = binary

    async def _run(self, args: List[str]) -> ProcessResult:
        logger.debug("Running %s %s", self.binary, " ".join(args))
        try:
            process = await asyncio.create_subprocess_exec(
                self.binary,
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise ExternalToolError(f"Failed to launch {self.binary}: {exc}") from exc
        stdout, stderr = await process.communicate()
        result = ProcessResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )
        if not result.ok:
            logger.warning(
                "%s exited with code %s: %s",
                self.binary,
                result.returncode,
                result.stderr.strip()[-500:],
            )
        return result

    async def list_subtitles(self, video_id: str) -> ProcessResult:
        return await self._run(["--list-subs", video_url(video_id)])

    async def download_subtitles(
        self, video_id: str, language: str, output_base: str
    ) -> ProcessResult:
        return await self._run(
            [
                "--write-subs",
                "--write-auto-subs",
                "--sub-langs",
                language,
                "--skip-download",
                "-o",
                output_base,
                video_url(video_id),
            ]
        )


__all__ = ["DEFAULT_YTDLP_BINARY", "ProcessResult", "YtDlpRunner", "video_url"]
