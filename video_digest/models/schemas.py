"""
Data models for the video digest application.
"""
import time
from typing import Optional, List
from pydantic import BaseModel, Field

from video_digest.config import config
from video_digest.core.prompts import section_summary_template


class TranscriptFragment(BaseModel):
    """One timed caption line from the transcript provider; only the text is kept."""
    text: str


class SummaryConfig(BaseModel):
    """Configuration for summarization operations."""
    model: str = config.DEFAULT_SUMMARY_MODEL
    chunk_size: int = Field(default=config.CHUNK_SIZE, ge=1)
    max_attempts: int = Field(default=config.MAX_ATTEMPTS, ge=1)
    initial_retry_delay: float = Field(default=config.INITIAL_RETRY_DELAY, ge=0)
    reset_retry_delay: float = Field(default=config.RESET_RETRY_DELAY, ge=0)
    pacing_delay: float = Field(default=config.PACING_DELAY, ge=0)
    pause_after_last_chunk: bool = False
    request_timeout: float = Field(default=config.REQUEST_TIMEOUT, gt=0)
    system_prompt: str = section_summary_template


class VideoSummary(BaseModel):
    """Model for storing video summary information."""
    video_id: Optional[str] = None
    summary: str
    points: List[str] = []
    transcript_text: Optional[str] = None
    segment_count: int = 0
    model: Optional[str] = None
    created_at: str = Field(default_factory=lambda: time.strftime("%Y-%m-%d %H:%M:%S"))
