"""
Main entry point for the Video Digest application.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv

from video_digest.models.schemas import SummaryConfig, VideoSummary
from video_digest.core.transcript_fetcher import TranscriptFetcher, extract_video_id
from video_digest.core.summarizer import TranscriptSummarizer
from video_digest.config import config
from video_digest.utils.error_handling import InvalidInput, VideoDigestError, describe_error
from video_digest.utils.helpers import BULLET, save_json, truncate_text
from video_digest.utils.logger import logging


def save_summary(summary: VideoSummary, output_file: str = None):
    """Save the summary to a JSON file."""
    if output_file is None:
        output_dir = Path(config.SUMMARIES_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        video_id = summary.video_id or "unknown"
        output_file = output_dir / f"{video_id}_summary.json"
    else:
        output_file = Path(output_file)

    save_json(summary.model_dump(), str(output_file))

    logging.info(f"Summary saved to: {output_file}")
    return output_file


def build_summarizer(
    model: str = config.DEFAULT_SUMMARY_MODEL,
    chunk_size: int = config.CHUNK_SIZE,
) -> TranscriptSummarizer:
    """Create a summarizer for the given model and chunk size."""
    if chunk_size < 1:
        raise InvalidInput(f"Chunk size must be at least 1, got {chunk_size}")

    return TranscriptSummarizer(config=SummaryConfig(model=model, chunk_size=chunk_size))


def summarize_text(
    transcript: str,
    model: str = config.DEFAULT_SUMMARY_MODEL,
    chunk_size: int = config.CHUNK_SIZE,
    on_progress: Optional[Callable[[str], None]] = None,
    video_id: Optional[str] = None,
    summarizer: Optional[TranscriptSummarizer] = None,
) -> VideoSummary:
    """
    Summarize transcript text that is already at hand.

    Args:
        transcript: Raw transcript text
        model: Chat model to use for summarization
        chunk_size: Maximum characters per section
        on_progress: Called with a status message before every attempt
        video_id: Optional video ID to attach to the result
        summarizer: Prebuilt summarizer (model and chunk_size are then ignored)

    Returns:
        VideoSummary object
    """
    if not transcript or not transcript.strip():
        raise InvalidInput("Transcript is empty")

    if summarizer is None:
        summarizer = build_summarizer(model, chunk_size)
    return summarizer.create_summary(transcript, video_id=video_id, on_progress=on_progress)


def summarize_youtube_video(
    url: str,
    model: str = config.DEFAULT_SUMMARY_MODEL,
    output_file: str = None,
    on_progress: Optional[Callable[[str], None]] = None,
    chunk_size: int = config.CHUNK_SIZE,
) -> VideoSummary:
    """
    Process a YouTube video: fetch its transcript and summarize it.

    Args:
        url: YouTube video URL or ID
        model: Chat model to use for summarization
        output_file: Optional file path to save the summary
        on_progress: Called with a status message before every attempt
        chunk_size: Maximum characters per section

    Returns:
        VideoSummary object
    """
    # 1. Resolve the video
    video_id = extract_video_id(url)
    if not video_id:
        raise InvalidInput("Invalid YouTube URL")

    # 2. Set up the summarizer first so a missing API key fails before any YouTube request
    summarizer = build_summarizer(model, chunk_size)

    # 3. Fetch transcript
    fetcher = TranscriptFetcher()
    transcript_text = fetcher.fetch_transcript(video_id)
    logging.debug(f"Transcript preview: {truncate_text(transcript_text)}")

    # 4. Summarize transcript
    summary = summarize_text(
        transcript_text,
        on_progress=on_progress,
        video_id=video_id,
        summarizer=summarizer,
    )
    logging.info(f"Summary for {video_id} has {len(summary.points)} points")

    # 5. Save summary
    if output_file:
        save_summary(summary, output_file)
    else:
        save_summary(summary)

    return summary


def main():
    """Main function to run the application from command line."""
    parser = argparse.ArgumentParser(description="Video Digest: bullet-point summaries of YouTube videos")
    parser.add_argument("url", help="YouTube video URL or ID")
    parser.add_argument("--model", default=config.DEFAULT_SUMMARY_MODEL,
                        help="Chat model for summarization")
    parser.add_argument("--output", help="Output file path for the summary")
    parser.add_argument("--chunk-size", type=int, default=config.CHUNK_SIZE,
                        help="Maximum characters per transcript section")

    args = parser.parse_args()

    # Load environment variables
    load_dotenv()

    progress = []

    def on_progress(message: str):
        progress.append(message)
        print(message)

    try:
        summary = summarize_youtube_video(
            args.url,
            model=args.model,
            output_file=args.output,
            on_progress=on_progress,
            chunk_size=args.chunk_size,
        )
    except VideoDigestError as e:
        logging.error(f"Summarization failed: {e}")
        print(f"Error: {describe_error(e, progress[-1] if progress else None)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logging.exception("Unexpected error during summarization")
        print(f"Error: {describe_error(e)}", file=sys.stderr)
        sys.exit(1)

    # Print the summary
    print("\n" + "=" * 80)
    print(f"Summary of video {summary.video_id}")
    print("=" * 80)
    for point in summary.points:
        print(f"{BULLET} {point}")
    print("=" * 80)


if __name__ == "__main__":
    main()
