"""
Module for fetching YouTube captions as plain transcript text.
"""

import re
from typing import List, Optional, Sequence
from urllib.parse import parse_qs, urlparse

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    CouldNotRetrieveTranscript,
)

from video_digest.config import config
from video_digest.models.schemas import TranscriptFragment
from video_digest.utils.error_handling import TranscriptUnavailable
from video_digest.utils.logger import logging

_VIDEO_ID_RE = re.compile(r"^[0-9A-Za-z_-]{11}$")
_VIDEO_URL_PATTERNS = [
    re.compile(r"youtu\.be/([0-9A-Za-z_-]{11})"),
    re.compile(r"(?:embed|shorts|live)/([0-9A-Za-z_-]{11})"),
]


def extract_video_id(reference: str) -> Optional[str]:
    """
    Extract the video ID from a YouTube URL or a bare video ID.

    Args:
        reference: Watch, short-link, embed or shorts URL, or an 11-character ID

    Returns:
        Video ID or None if extraction fails
    """
    reference = (reference or "").strip()
    if _VIDEO_ID_RE.match(reference):
        return reference

    parsed = urlparse(reference)
    video_id = parse_qs(parsed.query).get("v", [None])[0]
    if video_id and _VIDEO_ID_RE.match(video_id):
        return video_id

    for pattern in _VIDEO_URL_PATTERNS:
        match = pattern.search(reference)
        if match:
            return match.group(1)

    return None


class TranscriptFetcher:
    """Class to retrieve YouTube captions through youtube-transcript-api."""

    def __init__(self, languages: Optional[Sequence[str]] = None):
        """
        Initialize the fetcher.

        Args:
            languages: Caption languages in order of preference
        """
        self.languages = list(languages or config.TRANSCRIPT_LANGUAGES)
        self.api = YouTubeTranscriptApi()

    def fetch_fragments(self, video_id: str) -> List[TranscriptFragment]:
        """
        Fetch the caption fragments of a video in order.

        Args:
            video_id: YouTube video ID

        Returns:
            List of transcript fragments

        Raises:
            TranscriptUnavailable: If the video has no retrievable captions
        """
        logging.info(f"Fetching transcript for video: {video_id}")
        try:
            fetched = self.api.fetch(video_id, languages=self.languages)
        except CouldNotRetrieveTranscript as e:
            logging.error(f"Could not fetch transcript for {video_id}: {type(e).__name__}")
            raise TranscriptUnavailable(f"Could not fetch transcript for video {video_id}") from e

        return [TranscriptFragment(text=snippet.text) for snippet in fetched.snippets]

    def fetch_transcript(self, video_id: str) -> str:
        """
        Fetch a video's transcript as one space-joined string.

        Args:
            video_id: YouTube video ID

        Returns:
            Raw transcript text

        Raises:
            TranscriptUnavailable: If no transcript text could be fetched
        """
        fragments = self.fetch_fragments(video_id)
        transcript = " ".join(fragment.text for fragment in fragments)
        if not transcript.strip():
            raise TranscriptUnavailable(f"Transcript for video {video_id} is empty")

        logging.info(f"Fetched {len(fragments)} fragments ({len(transcript)} characters) for {video_id}")
        return transcript
