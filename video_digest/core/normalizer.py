"""
Module for cleaning raw transcript text before it is chunked.
"""

import re

TIMESTAMP_PATTERN = re.compile(r"\[\d{2}:\d{2}\.\d{3}\]")
# One or more "Name:" tokens at the start of a line
SPEAKER_LABEL_PATTERN = re.compile(r"^[ \t]*(?:[A-Za-z]+:[ \t]*)+", re.MULTILINE)
BLANK_LINE_PATTERN = re.compile(r"^[ \t]*\n", re.MULTILINE)
WHITESPACE_PATTERN = re.compile(r"\s+")
REPEATED_PUNCTUATION_PATTERN = re.compile(r"([.!?])\1+")


def _clean(text: str) -> str:
    text = TIMESTAMP_PATTERN.sub("", text)
    # Line-anchored rules go before whitespace collapsing removes the newlines
    text = SPEAKER_LABEL_PATTERN.sub("", text)
    text = BLANK_LINE_PATTERN.sub("", text)
    text = WHITESPACE_PATTERN.sub(" ", text)
    text = REPEATED_PUNCTUATION_PATTERN.sub(r"\1", text)
    return text.strip()


def normalize(raw: str) -> str:
    """
    Clean a raw transcript.

    Removes ``[MM:SS.mmm]`` timestamps and speaker labels, collapses
    whitespace and repeated ``.``, ``!`` or ``?``, drops blank lines and
    trims the result.

    Args:
        raw: Transcript text as returned by the provider

    Returns:
        Normalized single-line text
    """
    text = _clean(raw)
    # A pass can expose a new match, e.g. "[00:01..500]" becomes a timestamp
    while True:
        cleaned = _clean(text)
        if cleaned == text:
            return text
        text = cleaned
