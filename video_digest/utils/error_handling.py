"""
Centralized error handling for the application.

Every failure the pipeline reports on purpose derives from ``VideoDigestError``
so callers (CLI, API, Streamlit page) can tell expected failures from bugs.
"""

from typing import Optional


class VideoDigestError(Exception):
    """Base class for all expected failures of the summarization pipeline."""


class InvalidInput(VideoDigestError):
    """Missing or unparseable video reference, or an empty transcript."""


class TranscriptUnavailable(VideoDigestError):
    """The transcript provider could not produce a transcript for a video."""


class TransportError(VideoDigestError):
    """
    A call to the summarization API failed.

    Raised for network errors, non-2xx responses and malformed response
    bodies. These are the only failures the retry loop recovers from.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SummarizationExhausted(VideoDigestError):
    """A segment still failed after the maximum number of attempts."""

    def __init__(self, attempts: int, last_error: Exception):
        super().__init__(f"Summarization failed after {attempts} attempts: {last_error}")
        self.attempts = attempts
        self.last_error = last_error


class SummarizationCancelled(VideoDigestError):
    """The caller asked to stop before the next summarization request."""


def describe_error(error: Exception, last_progress: Optional[str] = None) -> str:
    """
    Build the message shown to a user for a failed run.

    Args:
        error: The exception that ended the run
        last_progress: Last progress message, used to say where it stopped

    Returns:
        Human-readable error message
    """
    message = str(error) or type(error).__name__
    if last_progress and isinstance(error, (SummarizationExhausted, SummarizationCancelled)):
        message = f"{message} (stopped at: {last_progress})"
    return message
