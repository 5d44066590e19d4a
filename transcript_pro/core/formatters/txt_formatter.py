"""
Plain text renderer.

Three modes:

- ``plain``: all segment texts joined by single spaces
- ``timestamped``: one ``[HH:MM:SS] text`` line per segment
- ``paragraph``: segments grouped into paragraphs split at long pauses

Timestamped and paragraph output can be preceded by a metadata header.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from transcript_pro.core.timestamps import format_timestamp_csv
from transcript_pro.models.schemas import TXTFormatOptions, TranscriptSegment


def generate_metadata_header(
    segments: Sequence[TranscriptSegment],
    exported_at: Optional[datetime] = None,
) -> str:
    """
    Build the export header block, followed by a blank line.

    Language and source come from the first segment; the duration is the
    end time of the last segment.
    """
    if not segments:
        return ""

    first, last = segments[0], segments[-1]
    exported_at = exported_at or datetime.now(timezone.utc)

    lines = [
        "=== Transcript Export ===",
        f"Exported: {exported_at.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Language: {first.lang}",
        f"Source: {first.source.value}",
        f"Segments: {len(segments)}",
        f"Duration: {format_timestamp_csv(last.end, 'hms')}",
        "========================",
    ]
    return "\n".join(lines) + "\n\n"


def format_plain(segments: Sequence[TranscriptSegment]) -> str:
    return " ".join(segment.text.strip() for segment in segments)


def format_timestamped(segments: Sequence[TranscriptSegment], timestamp_format: str) -> str:
    return "\n".join(
        f"[{format_timestamp_csv(segment.start, timestamp_format)}] {segment.text.strip()}"
        for segment in segments
    )


def format_paragraph(segments: Sequence[TranscriptSegment], paragraph_gap: float) -> str:
    """Group segments into paragraphs, starting a new one at every gap >= paragraph_gap."""
    if not segments:
        return ""

    paragraphs: List[str] = []
    current: List[str] = [segments[0].text.strip()]

    for previous, segment in zip(segments, segments[1:]):
        if segment.start - previous.end >= paragraph_gap:
            paragraphs.append(" ".join(current))
            current = []
        current.append(segment.text.strip())

    paragraphs.append(" ".join(current))
    return "\n\n".join(paragraphs)


def format_as_txt(
    segments: Sequence[TranscriptSegment],
    options: Optional[TXTFormatOptions] = None,
    exported_at: Optional[datetime] = None,
) -> str:
    """
    Format transcript segments as plain text.

    Args:
        segments: Transcript segments
        options: TXT options (mode, metadata, paragraph gap, timestamp style)
        exported_at: Export time shown in the metadata header (defaults to now, UTC)

    Returns:
        Text content ending in a single newline, or an empty string when
        there are no segments
    """
    options = options or TXTFormatOptions()

    if not segments:
        return ""

    # Plain mode is pure text, so the header never applies to it
    header = ""
    if options.include_metadata and options.mode != "plain":
        header = generate_metadata_header(segments, exported_at)

    if options.mode == "timestamped":
        content = format_timestamped(segments, options.timestamp_format)
    elif options.mode == "paragraph":
        content = format_paragraph(segments, options.paragraph_gap)
    else:
        content = format_plain(segments)

    return header + content + "\n"
