"""
Tests for the Streamlit page handlers.
"""

import pytest
from unittest.mock import patch

import requests

from video_digest.frontend.streamlit_app import process_youtube_url
from video_digest.utils.error_handling import SummarizationExhausted, TransportError


@pytest.fixture
def mock_st():
    """Fixture to mock the streamlit module used by the page."""
    with patch("video_digest.frontend.streamlit_app.st") as st:
        yield st


@pytest.fixture
def mock_display_error():
    with patch("video_digest.frontend.streamlit_app.display_error") as display_error:
        yield display_error


@pytest.mark.parametrize("error, message", [
    (ValueError("OpenAI API key is required"), "Error: OpenAI API key is required"),
    (requests.ConnectionError("dns"), "Error: dns"),
])
def test_process_youtube_url_shows_unexpected_errors(mock_st, mock_display_error, error, message):
    """Test failures outside the error taxonomy still end in an error box."""
    with patch("video_digest.frontend.streamlit_app.summarize_youtube_video", side_effect=error):
        points = process_youtube_url("V3TUEeB0kW0")

    assert points is None
    mock_display_error.assert_called_once_with(message)
    mock_st.empty.return_value.empty.assert_called_once()


def test_process_youtube_url_reports_where_it_stopped(mock_st, mock_display_error):
    def fail(url, on_progress):
        on_progress("Processing section 2/3...")
        raise SummarizationExhausted(5, TransportError("HTTP error! status: 500", status_code=500))

    with patch("video_digest.frontend.streamlit_app.summarize_youtube_video", side_effect=fail):
        points = process_youtube_url("V3TUEeB0kW0")

    assert points is None
    message = mock_display_error.call_args[0][0]
    assert message.startswith("Error: ")
    assert message.endswith("(stopped at: Processing section 2/3...)")


def test_process_youtube_url_returns_points(mock_st, mock_display_error):
    with patch("video_digest.frontend.streamlit_app.summarize_youtube_video") as mock_summarize:
        mock_summarize.return_value.points = ["One", "Two"]
        points = process_youtube_url("V3TUEeB0kW0")

    assert points == ["One", "Two"]
    mock_display_error.assert_not_called()
