"""
Module for summarizing transcripts section by section.
"""

import threading
import time
from typing import Callable, Optional

from video_digest.core.llm_client import ChatCompletionClient
from video_digest.core.normalizer import normalize
from video_digest.core.segmenter import segment
from video_digest.models.schemas import SummaryConfig, VideoSummary
from video_digest.utils.error_handling import (
    SummarizationCancelled,
    SummarizationExhausted,
    TransportError,
)
from video_digest.utils.helpers import split_summary_points
from video_digest.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    def __init__(
        self,
        call_summary_api: Optional[Callable[[str], str]] = None,
        config: Optional[SummaryConfig] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        """
        Initialize the summarizer.

        Args:
            call_summary_api: Callable that summarizes one section and raises
                TransportError on failure (defaults to a ChatCompletionClient)
            config: Configuration for summarization
            cancel_event: Event that, once set, stops the run before the next request
        """
        self.config = config or SummaryConfig()
        if call_summary_api is None:
            client = ChatCompletionClient(
                model=self.config.model,
                timeout=self.config.request_timeout,
                system_prompt=self.config.system_prompt,
            )
            call_summary_api = client.complete
        self.call_summary_api = call_summary_api
        self.cancel_event = cancel_event
        self.last_segment_count = 0

    def _check_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise SummarizationCancelled("Summarization was cancelled")

    def _sleep(self, seconds: float) -> None:
        if self.cancel_event is None:
            time.sleep(seconds)
        elif self.cancel_event.wait(seconds):
            raise SummarizationCancelled("Summarization was cancelled")

    def summarize_one(
        self,
        segment_text: str,
        delay: Optional[float] = None,
        on_attempt: Optional[Callable[[int], None]] = None,
    ) -> str:
        """
        Summarize one section, retrying failed calls with exponential backoff.

        Args:
            segment_text: Transcript section to summarize
            delay: First backoff delay in seconds (defaults to initial_retry_delay)
            on_attempt: Called with the 1-based attempt number before each call

        Returns:
            Summary text for the section

        Raises:
            SummarizationExhausted: When every attempt failed
            SummarizationCancelled: When the cancel event is set
        """
        max_attempts = self.config.max_attempts
        if delay is None:
            delay = self.config.initial_retry_delay
        attempts = 0

        while True:
            self._check_cancelled()
            if on_attempt is not None:
                on_attempt(attempts + 1)
            try:
                return self.call_summary_api(segment_text)
            except TransportError as e:
                attempts += 1
                if attempts == max_attempts:
                    logging.error(f"Giving up on section after {attempts} attempts: {e}")
                    raise SummarizationExhausted(attempts, e) from e

                logging.warning(
                    f"Summary request failed ({e}), retrying in {delay:g}s "
                    f"(attempt {attempts + 1}/{max_attempts})"
                )
                self._sleep(delay)
                delay *= 2

    def summarize(self, transcript: str, on_progress: Optional[Callable[[str], None]] = None) -> str:
        """
        Summarize a full transcript.

        The transcript is normalized and split into sections which are
        summarized strictly in order. Any section that exhausts its retries
        fails the whole run.

        Args:
            transcript: Raw transcript text
            on_progress: Called with a status message before every attempt

        Returns:
            Concatenated bullet-point summary, empty for an empty transcript
        """
        segments = segment(normalize(transcript), self.config.chunk_size)
        self.last_segment_count = len(segments)
        if not segments:
            logging.info("Transcript is empty after cleanup, nothing to summarize")
            return ""

        total = len(segments)
        logging.info(f"Summarizing transcript in {total} sections")

        summary = ""
        for index, section in enumerate(segments):
            self._check_cancelled()
            message = f"Processing section {index + 1}/{total}..."

            def announce(attempt: int, message: str = message) -> None:
                if on_progress is not None:
                    on_progress(message)

            # Backoff restarts lower once a section has gone through
            delay = self.config.initial_retry_delay if index == 0 else self.config.reset_retry_delay
            summary += self.summarize_one(section, delay=delay, on_attempt=announce) + " "

            is_last = index == total - 1
            if not is_last or self.config.pause_after_last_chunk:
                logging.debug(f"Section {index + 1}/{total} done, pausing {self.config.pacing_delay:g}s")
                self._sleep(self.config.pacing_delay)

        return summary.rstrip()

    def create_summary(
        self,
        transcript_text: str,
        video_id: Optional[str] = None,
        on_progress: Optional[Callable[[str], None]] = None,
    ) -> VideoSummary:
        """
        Create a full video summary.

        Args:
            transcript_text: Raw transcript text
            video_id: YouTube video ID the transcript belongs to
            on_progress: Called with a status message before every attempt

        Returns:
            VideoSummary object
        """
        summary = self.summarize(transcript_text, on_progress)

        return VideoSummary(
            video_id=video_id,
            summary=summary,
            points=split_summary_points(summary),
            transcript_text=transcript_text,
            segment_count=self.last_segment_count,
            model=self.config.model,
        )
