from pydantic import BaseModel
from typing import Optional, List
from video_digest.config import config


class SummarizeRequest(BaseModel):
    """Model for requesting a summary of a video or of supplied transcript text."""
    url: Optional[str] = None
    transcript: Optional[str] = None
    model: str = config.DEFAULT_SUMMARY_MODEL


class TranscriptResponse(BaseModel):
    """Model for transcript responses."""
    video_id: str
    transcript: str


class SummaryResponse(BaseModel):
    """Model for summary responses."""
    video_id: Optional[str] = None
    summary: str
    points: List[str] = []
    segment_count: int
    progress: List[str] = []
