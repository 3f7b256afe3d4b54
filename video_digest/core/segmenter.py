"""
Module for splitting normalized transcripts into bounded chunks.
"""

from typing import List

from video_digest.utils.error_handling import InvalidInput

SENTENCE_TERMINATORS = ".!?"


def _last_terminator(window: str) -> int:
    return max(window.rfind(char) for char in SENTENCE_TERMINATORS)


def segment(text: str, max_len: int) -> List[str]:
    """
    Split text into ordered chunks of at most ``max_len`` characters.

    Each chunk ends just after the last sentence terminator inside its
    window; a window with no terminator is cut at ``max_len``. Joining the
    chunks with no separator gives back ``text`` exactly.

    Args:
        text: Normalized transcript text
        max_len: Maximum chunk length in characters

    Returns:
        List of non-empty chunks, empty for empty text
    """
    if max_len < 1:
        raise InvalidInput(f"Chunk size must be at least 1, got {max_len}")

    segments = []
    start = 0
    while start < len(text):
        end = start + max_len
        if end < len(text):
            boundary = _last_terminator(text[start:end])
            if boundary != -1:
                end = start + boundary + 1
        segments.append(text[start:end])
        start = end
    return segments
