from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from typing import List, Optional, Tuple

from tools.captions.errors import ErrorKind, ExternalToolError
from tools.captions.extraction import (
    build_temp_base,
    candidate_suffixes,
    extract_transcript,
    resolve_artifact,
)
from tools.captions.models import NO_CAPTIONS_MESSAGE, Available, Failed, Unavailable
from tools.captions.ytdlp import ProcessResult, YtDlpRunner, video_url

LISTING_EN = (
    "[info] Available automatic captions for vid123:\n"
    "Language Name     Formats\n"
    "en       English  vtt, ttml\n"
)

VTT_PAYLOAD = (
    "WEBVTT\n\n"
    "1\n00:00:01.000 --> 00:00:03.500\nHello world\n\n"
    "2\n00:00:03.500 --> 00:00:05.000\nsecond line\nwrapped\n"
)


class _FakeRunner:
    """Stub runner that mimics yt-dlp without spawning processes."""

    def __init__(
        self,
        *,
        listing: ProcessResult = ProcessResult(0, LISTING_EN),
        download_code: int = 0,
        artifact_suffix: Optional[str] = ".en.vtt",
        artifact_content: str = VTT_PAYLOAD,
        list_error: Optional[Exception] = None,
        download_error: Optional[Exception] = None,
    ) -> None:
        self.listing = listing
        self.download_code = download_code
        self.artifact_suffix = artifact_suffix
        self.artifact_content = artifact_content
        self.list_error = list_error
        self.download_error = download_error
        self.downloads: List[Tuple[str, str, str]] = []
        self.written: Optional[Path] = None

    async def list_subtitles(self, video_id: str) -> ProcessResult:
        if self.list_error:
            raise self.list_error
        return self.listing

    async def download_subtitles(self, video_id: str, language: str, output_base: str) -> ProcessResult:
        self.downloads.append((video_id, language, output_base))
        if self.download_error:
            raise self.download_error
        if self.artifact_suffix is not None:
            self.written = Path(f"{output_base}{self.artifact_suffix}")
            self.written.write_text(self.artifact_content, encoding="utf-8")
        return ProcessResult(self.download_code, "", "boom" if self.download_code else "")


class ResolveArtifactTest(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.base = str(Path(self._tmp_dir.name) / "subs_vid")

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def test_lowest_priority_candidate_wins_when_others_absent(self) -> None:
        Path(f"{self.base}.vtt").write_text("WEBVTT\n", encoding="utf-8")
        resolved = resolve_artifact(self.base, [".en.vtt", ".en.vtt", ".vtt"])
        self.assertEqual(resolved, Path(f"{self.base}.vtt"))

    def test_priority_order(self) -> None:
        for suffix in (".fr.vtt", ".en.vtt", ".vtt"):
            Path(f"{self.base}{suffix}").write_text("WEBVTT\n", encoding="utf-8")
        self.assertEqual(
            resolve_artifact(self.base, candidate_suffixes("fr")),
            Path(f"{self.base}.fr.vtt"),
        )

    def test_empty_files_are_skipped(self) -> None:
        Path(f"{self.base}.fr.vtt").write_text("", encoding="utf-8")
        Path(f"{self.base}.en.vtt").write_text("WEBVTT\n", encoding="utf-8")
        self.assertEqual(
            resolve_artifact(self.base, candidate_suffixes("fr")),
            Path(f"{self.base}.en.vtt"),
        )

    def test_nothing_found(self) -> None:
        self.assertIsNone(resolve_artifact(self.base, candidate_suffixes("en")))

    def test_candidate_suffixes(self) -> None:
        self.assertEqual(candidate_suffixes("de"), [".de.vtt", ".en.vtt", ".vtt"])

    def test_temp_base_includes_video_id(self) -> None:
        base = build_temp_base("vid123", self._tmp_dir.name)
        self.assertTrue(Path(base).name.startswith("subs_vid123_"))
        self.assertEqual(Path(base).parent, Path(self._tmp_dir.name))


class ExtractTranscriptTest(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.temp_dir = self._tmp_dir.name

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    async def test_available_transcript(self) -> None:
        runner = _FakeRunner()
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)

        self.assertIsInstance(result, Available)
        self.assertEqual(len(result.transcript), 2)
        self.assertEqual(result.transcript[0].start_ms, 1000)
        self.assertEqual(result.transcript[1].text.strip(), "second line wrapped")
        self.assertIsNone(result.regenerated)
        self.assertEqual(runner.downloads[0][:2], ("vid123", "en"))

    async def test_artifact_is_deleted_after_read(self) -> None:
        runner = _FakeRunner()
        await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsNotNone(runner.written)
        self.assertFalse(runner.written.exists())
        self.assertEqual(list(Path(self.temp_dir).iterdir()), [])

    async def test_save_to_file_regenerates_vtt(self) -> None:
        runner = _FakeRunner()
        result = await extract_transcript(
            "vid123", "en", save_to_file=True, runner=runner, temp_dir=self.temp_dir
        )
        self.assertIsInstance(result, Available)
        self.assertEqual(result.regenerated.file_name, "vid123_en.vtt")
        self.assertTrue(result.regenerated.content.startswith("WEBVTT\n\n1\n00:00:01.000 --> 00:00:03.500\n"))
        self.assertIn("second line wrapped\n", result.regenerated.content)

    async def test_unavailable_language(self) -> None:
        runner = _FakeRunner()
        result = await extract_transcript("vid123", "fr", runner=runner, temp_dir=self.temp_dir)

        self.assertIsInstance(result, Unavailable)
        self.assertEqual(result.available_languages, ["en"])
        self.assertEqual(result.message, NO_CAPTIONS_MESSAGE)
        self.assertIn("No auto-generated subtitles", result.to_payload()["message"])
        self.assertEqual(runner.downloads, [])

    async def test_lister_failure_means_unavailable(self) -> None:
        runner = _FakeRunner(listing=ProcessResult(1, "", "ERROR: unavailable"))
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Unavailable)
        self.assertEqual(result.available_languages, [])

    async def test_lister_launch_error_means_unavailable(self) -> None:
        runner = _FakeRunner(list_error=ExternalToolError("Failed to launch yt-dlp"))
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Unavailable)

    async def test_download_failure(self) -> None:
        runner = _FakeRunner(download_code=1, artifact_suffix=None)
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Failed)
        self.assertEqual(result.kind, ErrorKind.EXTERNAL_TOOL_FAILURE)
        self.assertIn("code 1", result.reason)

    async def test_download_launch_error(self) -> None:
        runner = _FakeRunner(download_error=ExternalToolError("Failed to launch yt-dlp: not found"))
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Failed)
        self.assertEqual(result.kind, ErrorKind.EXTERNAL_TOOL_FAILURE)

    async def test_missing_artifact(self) -> None:
        runner = _FakeRunner(artifact_suffix=None)
        result = await extract_transcript("vid123", "en", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Failed)
        self.assertEqual(result.kind, ErrorKind.ARTIFACT_MISSING)
        self.assertIn("not found", result.reason)

    async def test_fallback_artifact_name(self) -> None:
        listing = ProcessResult(0, "Available automatic captions for vid123:\nde  German\n")
        runner = _FakeRunner(listing=listing, artifact_suffix=".vtt")
        result = await extract_transcript("vid123", "de", runner=runner, temp_dir=self.temp_dir)
        self.assertIsInstance(result, Available)
        self.assertFalse(runner.written.exists())

    async def test_missing_video_id_raises(self) -> None:
        with self.assertRaises(ValueError):
            await extract_transcript("", runner=_FakeRunner(), temp_dir=self.temp_dir)


class YtDlpRunnerTest(unittest.IsolatedAsyncioTestCase):
    async def test_missing_binary_raises_external_tool_error(self) -> None:
        runner = YtDlpRunner("yt-dlp-binary-that-does-not-exist")
        with self.assertRaises(ExternalToolError):
            await runner.list_subtitles("vid123")

    def test_video_url(self) -> None:
        self.assertEqual(video_url("vid123"), "https://www.youtube.com/watch?v=vid123")


if __name__ == "__main__":
    unittest.main()
