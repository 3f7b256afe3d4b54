"""
Module for calling an OpenAI-compatible chat-completions endpoint.
"""

import os
from typing import Optional

import requests

from video_digest.config import config
from video_digest.core.prompts import section_summary_template
from video_digest.utils.error_handling import TransportError
from video_digest.utils.logger import logging


class ChatCompletionClient:
    """Class to send one transcript section per request to the summary API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = config.DEFAULT_SUMMARY_MODEL,
        api_url: str = config.SUMMARY_API_URL,
        timeout: float = config.REQUEST_TIMEOUT,
        system_prompt: str = section_summary_template,
    ):
        """
        Initialize the client with API key.

        Args:
            api_key: OpenAI API key (if None, will try to get from environment)
            model: Chat model name sent with every request
            api_url: Full URL of the chat-completions endpoint
            timeout: Seconds to wait for each request
            system_prompt: Instruction sent as the system message
        """
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        if not self.api_key:
            raise ValueError("OpenAI API key is required. Set it in .env file or pass directly.")

        self.model = model
        self.api_url = api_url
        self.timeout = timeout
        self.system_prompt = system_prompt
        self.session = requests.Session()
        self.session.headers.update({
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        })

    def build_payload(self, segment: str) -> dict:
        """Build the chat-completions request body for one section."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": segment},
            ],
        }

    def complete(self, segment: str) -> str:
        """
        Summarize one transcript section.

        Args:
            segment: Transcript section to summarize

        Returns:
            Bullet-formatted summary text from the model

        Raises:
            TransportError: On network errors, non-2xx status or a malformed body
        """
        try:
            response = self.session.post(
                self.api_url,
                json=self.build_payload(segment),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request to summary API failed: {e}") from e

        if not response.ok:
            raise TransportError(f"HTTP error! status: {response.status_code}", status_code=response.status_code)

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise TransportError(f"Malformed summary API response: {e}", status_code=response.status_code) from e

        if not isinstance(content, str):
            raise TransportError("Malformed summary API response: content is not text", status_code=response.status_code)

        logging.debug(f"Summary API returned {len(content)} characters for a {len(segment)} character section")
        return content
