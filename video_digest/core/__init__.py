"""
Core functionality for the video digest application.

This package contains modules for fetching YouTube transcripts, cleaning
and chunking them, and summarizing the chunks with a language model.
"""
