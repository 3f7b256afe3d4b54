"""
Helper utility functions for the video digest application.
"""

import json
from typing import Dict, Any, List

BULLET = "•"


def split_summary_points(summary: str) -> List[str]:
    """
    Split a bullet-separated summary into its points.

    Args:
        summary: Summary text with points separated by "•"

    Returns:
        Trimmed, non-empty points in order
    """
    return [point.strip() for point in summary.split(BULLET) if point.strip()]


def save_json(data: Dict[str, Any], filepath: str, pretty: bool = True) -> None:
    """
    Save data to a JSON file.

    Args:
        data: Data to save
        filepath: Path to save the file
        pretty: Whether to format the JSON for readability
    """
    with open(filepath, 'w', encoding='utf-8') as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False, default=str)
        else:
            json.dump(data, f, ensure_ascii=False, default=str)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix
