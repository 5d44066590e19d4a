"""
SubRip (SRT) renderer.

    1
    00:00:00,000 --> 00:00:03,500
    First subtitle text

    2
    00:00:03,500 --> 00:00:07,000
    Second subtitle text
"""

import re
from typing import Sequence

from transcript_pro.core.timestamps import format_timestamp_srt
from transcript_pro.models.schemas import TranscriptSegment

# YouTube caption text may arrive HTML-escaped
HTML_ENTITIES = [
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
    ("&quot;", '"'),
    ("&apos;", "'"),
]


def sanitize_text(text: str) -> str:
    """Trim, decode HTML entities and normalize blank lines and spacing."""
    text = text.strip()
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return re.sub(r"[ \t]+", " ", text)


def format_as_srt(segments: Sequence[TranscriptSegment]) -> str:
    """
    Format transcript segments as a SubRip subtitle file.

    Args:
        segments: Transcript segments

    Returns:
        SRT content, or an empty string when there are no segments
    """
    if not segments:
        return ""

    entries = []
    for index, segment in enumerate(segments, start=1):
        start = format_timestamp_srt(segment.start)
        end = format_timestamp_srt(max(segment.end, segment.start))
        entries.append(f"{index}\n{start} --> {end}\n{sanitize_text(segment.text)}")

    return "\n\n".join(entries) + "\n"
