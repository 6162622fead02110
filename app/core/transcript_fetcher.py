"""
Module for fetching YouTube caption tracks.

Captions are retrieved through youtube-transcript-api. Several strategies are
tried in a fixed order and the first one that yields text wins.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from youtube_transcript_api import YouTubeTranscriptApi, VideoUnavailable

from app.models.schemas import TranscriptResult, TranscriptSource
from app.utils.error_handling import (
    InvalidTranscriptError,
    NoTranscriptAvailableError,
    VideoNotFoundError,
    VideoPrivateError,
)
from app.utils.logger import logging

MIN_TRANSCRIPT_LENGTH = 50
PINNED_LANGUAGES = ("en-US", "en")
FALLBACK_LANGUAGES = ["en-US", "en-GB", "en", "auto"]

NO_TRANSCRIPT_DETAILS = (
    "This video may not have captions, auto-generated captions, or they may be "
    "disabled. Try a different video."
)

Strategy = Tuple[str, Callable[[], Iterable]]


class AllStrategiesFailed(Exception):
    """Raised by first_successful when no strategy produced text."""

    def __init__(self, errors: List[Tuple[str, Exception]]):
        self.errors = errors
        super().__init__(f"{len(errors)} transcript strategies failed")

    @property
    def last_error(self) -> Optional[Exception]:
        return self.errors[-1][1] if self.errors else None


def join_snippets(snippets: Iterable) -> str:
    """Join caption fragments with single spaces."""
    return " ".join(snippet.text for snippet in snippets).strip()


def first_successful(strategies: Iterable[Strategy]) -> Tuple[str, str]:
    """
    Run strategies in order until one returns non-empty text.

    Args:
        strategies: (source label, zero-argument fetch) pairs, consumed lazily

    Returns:
        (source label, joined transcript text)

    Raises:
        AllStrategiesFailed: if every strategy raised or returned nothing
    """
    errors = []
    for source, attempt in strategies:
        try:
            text = join_snippets(attempt())
        except Exception as e:
            logging.warning(f"Transcript strategy '{source}' failed: {str(e)}")
            errors.append((source, e))
            continue

        if text:
            return source, text

        logging.warning(f"Transcript strategy '{source}' returned no text")
        errors.append((source, ValueError("empty transcript")))

    raise AllStrategiesFailed(errors)


class TranscriptFetcher:
    """Class to handle transcript retrieval for a video."""

    def __init__(self, api: Optional[YouTubeTranscriptApi] = None):
        """
        Initialize the fetcher.

        Args:
            api: youtube-transcript-api client (a fresh one is created if None)
        """
        self.api = api or YouTubeTranscriptApi()

    def _fetch_any(self, video_id: str):
        for transcript in self.api.list(video_id):
            return transcript.fetch()
        return []

    def strategies(self, video_id: str) -> List[Strategy]:
        """Ordered fallback strategies for a video."""
        strategies = [
            (
                TranscriptSource.AUTO_GENERATED.value,
                lambda: self.api.fetch(video_id, languages=PINNED_LANGUAGES),
            ),
            (
                TranscriptSource.AVAILABLE.value,
                lambda: self._fetch_any(video_id),
            ),
        ]
        for lang in FALLBACK_LANGUAGES:
            strategies.append((
                f"{TranscriptSource.LANGUAGE_TAGGED.value}-{lang}",
                lambda lang=lang: self.api.fetch(video_id, languages=[lang]),
            ))
        return strategies

    @staticmethod
    def get_video_title(video_id: str) -> str:
        """Placeholder title; no metadata lookup is performed."""
        return f"YouTube Video {video_id}"

    def fetch(self, video_id: str) -> TranscriptResult:
        """
        Fetch the transcript for a video.

        Args:
            video_id: YouTube video ID

        Returns:
            TranscriptResult with the joined caption text

        Raises:
            VideoNotFoundError: if the video is unavailable
            VideoPrivateError: if the video is private
            NoTranscriptAvailableError: if no strategy produced captions
            InvalidTranscriptError: if the captions are too short to summarize
        """
        logging.info(f"Fetching transcript for video: {video_id}")
        title = self.get_video_title(video_id)

        try:
            source, text = first_successful(self.strategies(video_id))
        except AllStrategiesFailed as e:
            last_error = e.last_error
            message = str(last_error) if last_error else ""
            if isinstance(last_error, VideoUnavailable) or "Video unavailable" in message:
                raise VideoNotFoundError(details=message)
            if "Private video" in message:
                raise VideoPrivateError(details=message)
            logging.error(f"All transcript methods failed for video {video_id}")
            raise NoTranscriptAvailableError(extra={"details": NO_TRANSCRIPT_DETAILS})

        logging.info(f"Transcript fetched via {source} ({len(text)} characters)")

        if len(text) < MIN_TRANSCRIPT_LENGTH:
            raise InvalidTranscriptError(
                extra={"details": "The video transcript appears to be too short for summarization"}
            )

        return TranscriptResult(video_id=video_id, title=title, text=text, source=source)
