"""
CSV renderer.

    Sequence,Start,End,Duration,Text,Language,Source
    1,0.000,3.500,3.500,Hello,en,manual
    2,3.500,7.000,3.500,"Hello, again",en,manual

Fields are escaped per RFC 4180. A UTF-8 byte order mark is written by
default so spreadsheet applications detect the encoding.
"""

import re
from typing import Optional, Sequence, Union

from transcript_pro.core.timestamps import calculate_duration, format_timestamp_csv
from transcript_pro.models.schemas import CSVFormatOptions, TranscriptSegment

BOM = "\ufeff"
CSV_COLUMNS = ["Sequence", "Start", "End", "Duration", "Text", "Language", "Source"]

_NEEDS_QUOTING = re.compile(r'[",\n\r]')


def escape_csv_field(field: Union[str, int, float]) -> str:
    """
    Escape a field value according to RFC 4180.

    Fields containing a comma, quote, newline or carriage return are wrapped
    in double quotes with internal quotes doubled. Numbers are never quoted.
    """
    if isinstance(field, (int, float)):
        return str(field)
    if _NEEDS_QUOTING.search(field):
        return '"' + field.replace('"', '""') + '"'
    return field


def format_as_csv(
    segments: Sequence[TranscriptSegment],
    options: Optional[CSVFormatOptions] = None,
) -> str:
    """
    Format transcript segments as CSV.

    Args:
        segments: Transcript segments
        options: CSV options (timestamp style, BOM, header); defaults when None

    Returns:
        CSV content
    """
    options = options or CSVFormatOptions()
    style = options.timestamp_format

    bom = BOM if options.include_bom else ""
    header = ",".join(CSV_COLUMNS) + "\n" if options.include_header else ""

    if not segments:
        return bom + header

    rows = []
    for index, segment in enumerate(segments, start=1):
        duration = calculate_duration(segment.start, segment.end)
        rows.append(",".join([
            escape_csv_field(index),
            format_timestamp_csv(segment.start, style),
            format_timestamp_csv(segment.end, style),
            format_timestamp_csv(duration, style),
            escape_csv_field(segment.text),
            escape_csv_field(segment.lang),
            escape_csv_field(segment.source.value),
        ]))

    return bom + header + "\n".join(rows) + "\n"
