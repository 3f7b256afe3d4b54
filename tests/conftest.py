"""
Configuration for pytest tests.
"""

import os
import pytest
from pathlib import Path
from unittest.mock import patch

# Config reads the environment at import time, so set it before any test module imports the package
os.environ.setdefault("OPENAI_API_KEY", "test_api_key")
os.environ.setdefault("DATA_DIR", "test_data")
os.environ.setdefault("SUMMARIES_DIR", os.path.join("test_data", "summaries"))
os.environ.setdefault("ENVIRONMENT", "development")


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test data directories."""
    test_data_dir = Path(os.environ["DATA_DIR"])
    test_summaries_dir = Path(os.environ["SUMMARIES_DIR"])

    test_summaries_dir.mkdir(parents=True, exist_ok=True)

    yield

    import shutil
    shutil.rmtree(test_data_dir, ignore_errors=True)


@pytest.fixture
def mock_sleep():
    """Fixture to replace time.sleep in the summarizer so backoff and pacing are instant."""
    with patch("video_digest.core.summarizer.time.sleep") as sleep:
        yield sleep


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://www.youtube.com/watch?v=V3TUEeB0kW0&t=42s"
