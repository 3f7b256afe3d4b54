"""
Tests for the FastAPI routes (no network access required).
"""

from unittest.mock import patch

from fastapi.testclient import TestClient

from video_digest.api.app import app
from video_digest.models.schemas import VideoSummary
from video_digest.utils.error_handling import (
    InvalidInput,
    SummarizationExhausted,
    TranscriptUnavailable,
    TransportError,
)

client = TestClient(app)
client_no_raise = TestClient(app, raise_server_exceptions=False)


def fake_summary(video_id=None):
    return VideoSummary(
        video_id=video_id,
        summary="• First point • Second point",
        points=["First point", "Second point"],
        segment_count=1,
    )


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Video Digest"
    assert "X-Process-Time" in response.headers


def test_transcript_requires_video_id():
    response = client.get("/api/v1/transcript")
    assert response.status_code == 400
    assert response.json()["detail"] == "Video ID is required"


def test_transcript_success():
    with patch("video_digest.api.routes.TranscriptFetcher") as mock_fetcher_class:
        mock_fetcher_class.return_value.fetch_transcript.return_value = "hello there general"
        response = client.get("/api/v1/transcript", params={"video_id": "V3TUEeB0kW0"})

    assert response.status_code == 200
    assert response.json() == {"video_id": "V3TUEeB0kW0", "transcript": "hello there general"}


def test_transcript_unavailable():
    with patch("video_digest.api.routes.TranscriptFetcher") as mock_fetcher_class:
        mock_fetcher_class.return_value.fetch_transcript.side_effect = TranscriptUnavailable("no captions")
        response = client.get("/api/v1/transcript", params={"video_id": "V3TUEeB0kW0"})

    assert response.status_code == 404


def test_summarize_requires_exactly_one_source():
    assert client.post("/api/v1/summarize", json={}).status_code == 400
    response = client.post("/api/v1/summarize", json={"url": "V3TUEeB0kW0", "transcript": "text"})
    assert response.status_code == 400


def test_summarize_url():
    def fake_summarize(url, model, on_progress):
        on_progress("Processing section 1/1...")
        return fake_summary("V3TUEeB0kW0")

    with patch("video_digest.api.routes.summarize_youtube_video", side_effect=fake_summarize):
        response = client.post("/api/v1/summarize", json={"url": "https://youtu.be/V3TUEeB0kW0"})

    assert response.status_code == 200
    body = response.json()
    assert body["video_id"] == "V3TUEeB0kW0"
    assert body["points"] == ["First point", "Second point"]
    assert body["progress"] == ["Processing section 1/1..."]


def test_summarize_transcript_text():
    with patch("video_digest.api.routes.summarize_text", return_value=fake_summary()) as mock_summarize:
        response = client.post("/api/v1/summarize", json={"transcript": "Hello world.", "model": "gpt-4o-mini"})

    assert response.status_code == 200
    assert mock_summarize.call_args.kwargs["model"] == "gpt-4o-mini"


def test_summarize_invalid_url():
    with patch("video_digest.api.routes.summarize_youtube_video", side_effect=InvalidInput("Invalid YouTube URL")):
        response = client.post("/api/v1/summarize", json={"url": "nope"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid YouTube URL"


def test_summarize_exhausted_reports_last_progress():
    def failing_summarize(url, model, on_progress):
        on_progress("Processing section 3/5...")
        raise SummarizationExhausted(5, TransportError("HTTP error! status: 503", status_code=503))

    with patch("video_digest.api.routes.summarize_youtube_video", side_effect=failing_summarize):
        response = client.post("/api/v1/summarize", json={"url": "V3TUEeB0kW0"})

    assert response.status_code == 502
    assert "Processing section 3/5..." in response.json()["detail"]


def test_summarize_unexpected_error():
    with patch("video_digest.api.routes.summarize_text", side_effect=RuntimeError("boom")):
        response = client_no_raise.post("/api/v1/summarize", json={"transcript": "Hello world."})

    assert response.status_code == 500
