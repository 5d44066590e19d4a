"""
Output format renderers for transcript segments.

Each renderer takes a list of segments (and its options, where it has any)
and returns the complete file content as a string.
"""

from transcript_pro.core.formatters.srt_formatter import format_as_srt
from transcript_pro.core.formatters.vtt_formatter import format_as_vtt
from transcript_pro.core.formatters.csv_formatter import format_as_csv
from transcript_pro.core.formatters.txt_formatter import format_as_txt

__all__ = ["format_as_srt", "format_as_vtt", "format_as_csv", "format_as_txt"]
