"""
Tests for the transcript segmenter module.
"""

import pytest

from video_digest.core.segmenter import segment
from video_digest.utils.error_handling import InvalidInput


def test_segment_short_text_is_one_segment():
    text = "Hello world. This is a test."
    assert segment(text, 2000) == [text]


def test_segment_empty_text():
    assert segment("", 2000) == []


def test_segment_breaks_after_last_terminator():
    text = "One two. Three four! Five six seven eight nine"
    segments = segment(text, 24)

    assert segments[0] == "One two. Three four!"
    assert "".join(segments) == text


def test_segment_forced_cut_without_terminator():
    text = "a" * 25
    assert segment(text, 10) == ["a" * 10, "a" * 10, "a" * 5]


def test_segment_rejects_non_positive_length():
    with pytest.raises(InvalidInput):
        segment("text", 0)


@pytest.mark.parametrize("text", [
    "Hello world. This is a test.",
    "No terminators at all in this rather long line of words",
    "Short! Q? Yes. " * 40,
    "...!!!???",
    "x",
])
@pytest.mark.parametrize("max_len", [1, 2, 7, 16, 100, 2000])
def test_segment_reconstructs_and_respects_bound(text, max_len):
    """Test segments join back to the input and never exceed max_len."""
    segments = segment(text, max_len)

    assert "".join(segments) == text
    assert all(0 < len(s) <= max_len for s in segments)
