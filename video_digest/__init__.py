"""
Video Digest Application.

Fetches a YouTube video's transcript, splits it into sentence-bounded chunks
and turns each chunk into bullet points with a chat-completion model.
"""

from video_digest.config import config

__version__ = config.APP_VERSION
