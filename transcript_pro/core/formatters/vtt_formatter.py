"""
WebVTT renderer.

Cues carry no identifiers; caption text is plain, so markup characters
are escaped rather than interpreted.
"""

import re
from typing import Sequence

from transcript_pro.core.timestamps import format_timestamp_vtt
from transcript_pro.models.schemas import TranscriptSegment

WEBVTT_HEADER = "WEBVTT\n"


def sanitize_text(text: str) -> str:
    """Trim, escape ``&``, ``<`` and ``>`` and normalize blank lines and spacing."""
    text = (
        text.strip()
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
    text = re.sub(r"\n{3,}", "\n\n", text)
    return re.sub(r"[ \t]+", " ", text)


def format_as_vtt(segments: Sequence[TranscriptSegment]) -> str:
    """
    Format transcript segments as a WebVTT file.

    Args:
        segments: Transcript segments

    Returns:
        WebVTT content; just the ``WEBVTT`` header line when there are no segments
    """
    if not segments:
        return WEBVTT_HEADER

    cues = []
    for segment in segments:
        start = format_timestamp_vtt(segment.start)
        end = format_timestamp_vtt(max(segment.end, segment.start))
        cues.append(f"{start} --> {end}\n{sanitize_text(segment.text)}")

    return WEBVTT_HEADER + "\n" + "\n\n".join(cues) + "\n"
