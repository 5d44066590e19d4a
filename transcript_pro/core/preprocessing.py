"""
Preprocessing functions for transcript segments.

Pure, composable transformations applied before formatting. None of them
mutate their input; each returns a new list.
"""

import re
from typing import List, Sequence

from transcript_pro.models.schemas import TranscriptSegment

# Whole-text silence markers found in auto-generated captions
SILENCE_PATTERNS = [
    re.compile(r"^\[silence\]$", re.IGNORECASE),
    re.compile(r"^\[pause\]$", re.IGNORECASE),
    re.compile(r"^\[music\]$", re.IGNORECASE),
    re.compile(r"^\.$"),
    re.compile(r"^-$"),
    re.compile(r"^\s*$"),
]


def filter_empty_segments(segments: Sequence[TranscriptSegment]) -> List[TranscriptSegment]:
    """
    Drop segments whose text is empty or whitespace only.

    Args:
        segments: Transcript segments to filter

    Returns:
        New list with only the non-empty segments, in order
    """
    return [segment for segment in segments if segment.text.strip()]


def is_silence_marker(text: str) -> bool:
    """Whether the whole text, ignoring surrounding whitespace, is a silence marker."""
    stripped = text.strip()
    return any(pattern.match(stripped) for pattern in SILENCE_PATTERNS)


def remove_silence_markers(segments: Sequence[TranscriptSegment]) -> List[TranscriptSegment]:
    """
    Drop segments that are nothing but a silence marker.

    Removed: ``[silence]``, ``[pause]``, ``[music]`` (any case), a lone
    ``.`` or ``-``, and empty text. Text that merely contains one of these
    inside a longer sentence is kept.

    Args:
        segments: Transcript segments to filter

    Returns:
        New list without the silence markers
    """
    return [segment for segment in segments if not is_silence_marker(segment.text)]


def merge_overlapping_segments(segments: Sequence[TranscriptSegment]) -> List[TranscriptSegment]:
    """
    Merge consecutive segments whose time ranges overlap.

    Two segments overlap when ``current.end > next.start``; touching
    endpoints do not. A merged segment spans the earliest start to the
    latest end, joins the texts with one space, and keeps the language and
    source of the first segment in the chain.

    Args:
        segments: Transcript segments in non-decreasing start order

    Returns:
        New list with overlapping runs merged
    """
    if not segments:
        return []

    merged: List[TranscriptSegment] = []
    current = segments[0]

    for next_segment in segments[1:]:
        if current.end > next_segment.start:
            current = current.model_copy(update={
                "start": min(current.start, next_segment.start),
                "end": max(current.end, next_segment.end),
                "text": f"{current.text.strip()} {next_segment.text.strip()}",
            })
        else:
            merged.append(current)
            current = next_segment

    merged.append(current)
    return merged
