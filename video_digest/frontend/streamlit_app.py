"""
Main Streamlit application for Video Digest.
"""

import streamlit as st
from dotenv import load_dotenv

from video_digest.frontend.components import header, youtube_input, display_points, display_error
from video_digest.main import summarize_youtube_video
from video_digest.utils.error_handling import VideoDigestError, describe_error
from video_digest.utils.logger import logging


load_dotenv()


def process_youtube_url(url: str):
    """
    Summarize a video, showing each progress message as it arrives.

    Args:
        url: YouTube URL

    Returns:
        List of summary points, or None if the run failed
    """
    status = st.empty()
    progress = []

    def on_progress(message: str):
        progress.append(message)
        status.info(message)

    try:
        summary = summarize_youtube_video(url, on_progress=on_progress)
    except VideoDigestError as e:
        logging.error(f"Summarization failed for {url}: {e}")
        status.empty()
        display_error(f"Error: {describe_error(e, progress[-1] if progress else None)}")
        return None
    except Exception as e:
        logging.exception(f"Unexpected error summarizing {url}")
        status.empty()
        display_error(f"Error: {describe_error(e)}")
        return None

    status.empty()
    return summary.points


def main():
    header()

    url = youtube_input()
    if url:
        points = process_youtube_url(url)
        if points is not None:
            display_points(points)


if __name__ == "__main__":
    main()
