"""
Helper utility functions for the YouTube transcript server.
"""

import json
from pathlib import Path
from typing import Any


def to_json(data: Any, pretty: bool = True) -> str:
    """
    Serialize data to a JSON string.

    Args:
        data: Data to serialize
        pretty: Whether to format the JSON for readability

    Returns:
        JSON string
    """
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, ensure_ascii=False)


def write_text_file(filepath: str, content: str) -> Path:
    """
    Write text to a file, creating parent directories as needed.

    Args:
        filepath: Absolute or relative path of the file
        content: Text to write (UTF-8)

    Returns:
        Resolved path of the written file
    """
    path = Path(filepath).expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def truncate_text(text: str, max_length: int) -> str:
    """
    Truncate text to a maximum length, noting how much was left out.

    Args:
        text: Text to truncate
        max_length: Maximum number of characters kept

    Returns:
        The text unchanged if it fits, otherwise its first ``max_length``
        characters followed by an omission notice
    """
    if len(text) <= max_length:
        return text
    omitted = len(text) - max_length
    return f"{text[:max_length]}\n\n... [Preview truncated, {omitted} more characters omitted] ..."
