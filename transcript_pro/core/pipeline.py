"""
Transcript processing pipeline.

Applies the requested preprocessors in a fixed order (silence removal,
then empty filtering, then overlap merging) and renders the result in the
requested output format.
"""

from typing import List, Optional, Sequence, Union

from transcript_pro.core.formatters import format_as_csv, format_as_srt, format_as_txt, format_as_vtt
from transcript_pro.core.preprocessing import (
    filter_empty_segments,
    merge_overlapping_segments,
    remove_silence_markers,
)
from transcript_pro.models.schemas import (
    CSVFormatOptions,
    OutputFormat,
    PreprocessingFlags,
    TXTFormatOptions,
    TranscriptSegment,
)
from transcript_pro.utils.error_handling import UnsupportedFormat
from transcript_pro.utils.logger import logging


def resolve_format(output_format: Union[OutputFormat, str]) -> OutputFormat:
    """Turn a format token into an OutputFormat, raising UnsupportedFormat for unknown ones."""
    if isinstance(output_format, OutputFormat):
        return output_format
    try:
        return OutputFormat(str(output_format))
    except ValueError:
        raise UnsupportedFormat(str(output_format)) from None


def preprocess_segments(
    segments: Sequence[TranscriptSegment],
    flags: Optional[PreprocessingFlags] = None,
) -> List[TranscriptSegment]:
    """
    Run the enabled preprocessors over the segments.

    Silence markers go first so they are never merged into real text;
    empty filtering runs before merging for the same reason.
    """
    flags = flags or PreprocessingFlags()
    result = list(segments)

    if flags.remove_silence:
        result = remove_silence_markers(result)
    if flags.filter_empty:
        result = filter_empty_segments(result)
    if flags.merge_overlaps:
        result = merge_overlapping_segments(result)

    if len(result) != len(segments):
        logging.debug(f"Preprocessing reduced {len(segments)} segments to {len(result)}")
    return result


def render_segments(
    segments: Sequence[TranscriptSegment],
    output_format: Union[OutputFormat, str],
    csv_options: Optional[CSVFormatOptions] = None,
    txt_options: Optional[TXTFormatOptions] = None,
) -> Union[List[TranscriptSegment], str]:
    """
    Render segments in the given format.

    ``json`` is the identity case and returns the segments themselves.
    """
    output_format = resolve_format(output_format)

    if output_format == OutputFormat.JSON:
        return list(segments)
    if output_format == OutputFormat.SRT:
        return format_as_srt(segments)
    if output_format == OutputFormat.VTT:
        return format_as_vtt(segments)
    if output_format == OutputFormat.CSV:
        return format_as_csv(segments, csv_options)
    if output_format == OutputFormat.TXT:
        return format_as_txt(segments, txt_options)

    raise UnsupportedFormat(output_format.value)


def process_segments(
    segments: Sequence[TranscriptSegment],
    flags: Optional[PreprocessingFlags] = None,
    output_format: Union[OutputFormat, str] = OutputFormat.JSON,
    csv_options: Optional[CSVFormatOptions] = None,
    txt_options: Optional[TXTFormatOptions] = None,
) -> Union[List[TranscriptSegment], str]:
    """
    Preprocess and render a transcript.

    Args:
        segments: Segments in non-decreasing start order
        flags: Which preprocessors to run
        output_format: One of json, srt, vtt, csv, txt
        csv_options: Options used when rendering CSV
        txt_options: Options used when rendering TXT

    Returns:
        The preprocessed segments for ``json``, otherwise the rendered string

    Raises:
        UnsupportedFormat: If the output format is not recognized
    """
    # Validate the format before doing any work
    output_format = resolve_format(output_format)
    processed = preprocess_segments(segments, flags)
    return render_segments(processed, output_format, csv_options, txt_options)
