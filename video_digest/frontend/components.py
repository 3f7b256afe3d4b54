"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import List, Optional

from video_digest.utils.helpers import BULLET


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="AI YouTube Summarizer",
        page_icon="🎬",
        layout="centered",
    )

    st.title("AI YouTube Summarizer")
    st.divider()


def youtube_input(disabled: bool = False) -> Optional[str]:
    """
    Display a YouTube URL input field.

    Returns:
        The entered YouTube URL or None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "Enter Youtube Video URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
            disabled=disabled,
        )
        submit = st.form_submit_button("Get Summary", disabled=disabled)

    if submit and url:
        return url

    return None


def display_points(points: List[str]):
    """
    Display summary points as a bullet list.

    Args:
        points: Trimmed summary points
    """
    st.markdown("### Summary")
    for point in points:
        st.markdown(f"{BULLET} {point}")


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)
