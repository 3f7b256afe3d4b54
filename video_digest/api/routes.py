"""
API routes for the Video Digest application.
"""

from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query

from video_digest.api.schemas import (
    SummarizeRequest,
    SummaryResponse,
    TranscriptResponse,
)
from video_digest.core.transcript_fetcher import TranscriptFetcher
from video_digest.main import summarize_text, summarize_youtube_video
from video_digest.utils.error_handling import (
    InvalidInput,
    SummarizationCancelled,
    SummarizationExhausted,
    TranscriptUnavailable,
    describe_error,
)
from video_digest.utils.logger import logging

router = APIRouter(prefix="/api/v1", tags=["youtube"])


@router.get("/transcript", response_model=TranscriptResponse)
def get_transcript(video_id: Optional[str] = Query(None, description="YouTube video ID")):
    """Fetch the space-joined caption text of a video."""
    if not video_id:
        raise HTTPException(status_code=400, detail="Video ID is required")

    try:
        transcript = TranscriptFetcher().fetch_transcript(video_id)
    except TranscriptUnavailable as e:
        logging.error(f"Transcript unavailable for {video_id}: {e}")
        raise HTTPException(status_code=404, detail=str(e))

    return TranscriptResponse(video_id=video_id, transcript=transcript)


@router.post("/summarize", response_model=SummaryResponse)
def summarize_video(request: SummarizeRequest):
    """
    Summarize a YouTube video by URL, or a transcript passed in the body.

    - Sections are processed one after another, so this call blocks until done
    - The progress messages emitted along the way are returned with the result
    """
    if bool(request.url) == bool(request.transcript):
        raise HTTPException(status_code=400, detail="Provide exactly one of 'url' or 'transcript'")

    progress: List[str] = []
    try:
        if request.url:
            summary = summarize_youtube_video(request.url, model=request.model, on_progress=progress.append)
        else:
            summary = summarize_text(request.transcript, model=request.model, on_progress=progress.append)
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TranscriptUnavailable as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (SummarizationExhausted, SummarizationCancelled) as e:
        logging.error(f"Summarization failed: {e}")
        raise HTTPException(
            status_code=502,
            detail=describe_error(e, progress[-1] if progress else None),
        )

    return SummaryResponse(
        video_id=summary.video_id,
        summary=summary.summary,
        points=summary.points,
        segment_count=summary.segment_count,
        progress=progress,
    )
