"""
Transcript tools exposed over JSON-RPC.

Each tool takes a validated ToolInput and returns either a string or a
JSON-serializable value (pydantic models included).
"""

from typing import Any, Callable, Dict, List, Optional, Union

from pydantic_core import to_jsonable_python

from transcript_pro.api.schemas import TimedTranscriptPreview, ToolInput
from transcript_pro.config import config
from transcript_pro.core.formatters.txt_formatter import format_plain
from transcript_pro.core.pipeline import preprocess_segments, render_segments, resolve_format
from transcript_pro.core.transcriber import AudioTranscriber
from transcript_pro.core.youtube_client import YouTubeTranscriptClient
from transcript_pro.models.schemas import (
    CaptionTrack,
    CSVFormatOptions,
    OutputFormat,
    TranscriptionConfig,
    TranscriptSegment,
    TXTFormatOptions,
    VideoInfo,
)
from transcript_pro.utils.error_handling import OutputFileError, TranscriptUnavailable
from transcript_pro.utils.helpers import to_json, truncate_text, write_text_file
from transcript_pro.utils.logger import logging


def fetch_segments(tool_input: ToolInput) -> List[TranscriptSegment]:
    """
    Fetch the caption segments for a video, falling back to speech
    recognition when allowed and no caption track exists.
    """
    lang = tool_input.lang or config.DEFAULT_LANGUAGE
    client = YouTubeTranscriptClient(tool_input.url)

    try:
        return client.get_segments(lang)
    except TranscriptUnavailable as e:
        allow_asr = tool_input.allow_asr
        if allow_asr is None:
            allow_asr = config.ENABLE_ASR_FALLBACK
        if not allow_asr:
            raise

        logging.info(f"{str(e)}; falling back to speech recognition")
        transcriber = AudioTranscriber(
            TranscriptionConfig(model=config.DEFAULT_TRANSCRIPTION_MODEL, language=lang)
        )
        segments = transcriber.transcribe(client.yt, lang)
        if not segments:
            raise TranscriptUnavailable("Speech recognition produced no transcript segments") from e
        return segments


def resolve_preview_limit(preview: Optional[Union[bool, int]]) -> Optional[int]:
    """``True`` means the default limit; an integer is a custom limit; anything else disables preview."""
    if preview is True:
        return config.DEFAULT_PREVIEW_CHARS
    if preview is None or preview is False:
        return None
    return int(preview)


def preview_segments(segments: List[TranscriptSegment], limit: int) -> TimedTranscriptPreview:
    """
    Keep the longest prefix of segments whose pretty-printed JSON array fits
    in ``limit`` characters. At least one segment is shown when any exist.
    """
    shown: List[TranscriptSegment] = []
    used = 4  # "[\n" and "\n]"
    for segment in segments:
        body = to_json(segment.model_dump(mode="json"))
        # Every line of an array element is indented two more spaces
        size = len(body) + 2 * (body.count("\n") + 1)
        if shown:
            size += 2  # ",\n" separator
        if shown and used + size > limit:
            break
        shown.append(segment)
        used += size

    omitted = len(segments) - len(shown)
    return TimedTranscriptPreview(
        segments=shown,
        segments_shown=len(shown),
        total_segments=len(segments),
        segments_omitted=omitted,
        truncated=omitted > 0,
    )


def write_output_file(
    output_file: str,
    content: str,
    output_format: OutputFormat,
    segments: List[TranscriptSegment],
) -> str:
    """
    Write formatted content to a file and describe what was written.

    Raises:
        OutputFileError: If the path is blank or the file cannot be written
    """
    if not output_file.strip():
        raise OutputFileError("outputFile parameter cannot be an empty string")

    try:
        path = write_text_file(output_file, content)
        size_kb = path.stat().st_size / 1024
    except OSError as e:
        raise OutputFileError(f"Failed to write output file: {str(e)}") from e

    duration_minutes = segments[-1].end / 60 if segments else 0
    logging.info(f"Transcript written to {path} ({size_kb:.2f} KB)")

    return "\n".join([
        "✅ Transcript successfully written to file",
        "",
        f"File: {path}",
        f"Format: {output_format.value.upper()}",
        f"Size: {size_kb:.2f} KB",
        f"Segments: {len(segments)}",
        f"Duration: {duration_minutes:.2f} minutes",
    ])


def list_tracks(tool_input: ToolInput) -> List[CaptionTrack]:
    """Lists available caption tracks for a YouTube video."""
    return YouTubeTranscriptClient(tool_input.url).list_tracks()


def get_transcript(tool_input: ToolInput) -> str:
    """Returns the whole transcript as a single line of plain text."""
    return format_plain(fetch_segments(tool_input))


def get_timed_transcript(tool_input: ToolInput) -> Union[List[TranscriptSegment], TimedTranscriptPreview, str]:
    """
    Returns timestamped transcript segments or a formatted transcript.

    Preprocessing runs in the fixed order removeSilence, filterEmpty,
    mergeOverlaps. With ``outputFile`` the full content goes to the file and
    a summary is returned; with ``preview`` the returned content is truncated.
    """
    # Reject unknown formats before touching the network
    output_format = resolve_format(tool_input.format)
    preview_limit = resolve_preview_limit(tool_input.preview)

    segments = preprocess_segments(fetch_segments(tool_input), tool_input.flags)
    result = render_segments(
        segments,
        output_format,
        csv_options=tool_input.csv_options,
        txt_options=tool_input.txt_options,
    )
    content = result if isinstance(result, str) else to_json(to_jsonable_python(result))

    preview: Union[TimedTranscriptPreview, str, None] = None
    if preview_limit is not None:
        if output_format == OutputFormat.JSON:
            preview = preview_segments(segments, preview_limit)
        else:
            preview = truncate_text(content, preview_limit)

    if tool_input.output_file is not None:
        message = write_output_file(tool_input.output_file, content, output_format, segments)
        if preview is None:
            return message
        if not isinstance(preview, str):
            preview = to_json(to_jsonable_python(preview, by_alias=True))
        return f"{message}\n\nPreview:\n{preview}"

    if preview is not None:
        return preview
    return result


def get_video_info(tool_input: ToolInput) -> VideoInfo:
    """Returns video metadata including title, channel, duration and caption tracks."""
    return YouTubeTranscriptClient(tool_input.url).get_video_info()


TOOLS: Dict[str, Callable[[ToolInput], Any]] = {
    "list_tracks": list_tracks,
    "get_transcript": get_transcript,
    "get_timed_transcript": get_timed_transcript,
    "get_video_info": get_video_info,
}


URL_PROPERTY = {"type": "string", "description": "YouTube video URL or video ID"}
LANG_PROPERTY = {"type": "string", "description": "Language code (default: en)", "default": "en"}

TOOL_DEFINITIONS = [
    {
        "name": "list_tracks",
        "description": "Lists available caption tracks for a YouTube video",
        "inputSchema": {
            "type": "object",
            "properties": {"url": URL_PROPERTY},
            "required": ["url"],
        },
    },
    {
        "name": "get_transcript",
        "description": "Returns a merged plain text transcript",
        "inputSchema": {
            "type": "object",
            "properties": {"url": URL_PROPERTY, "lang": LANG_PROPERTY},
            "required": ["url"],
        },
    },
    {
        "name": "get_timed_transcript",
        "description": (
            "Returns timestamped transcript segments in multiple formats "
            "(JSON, SRT, VTT, CSV, TXT) with optional preprocessing"
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": URL_PROPERTY,
                "lang": LANG_PROPERTY,
                "format": {
                    "type": "string",
                    "description": (
                        "Output format (default: json). Options: 'json' (structured data), "
                        "'srt' (SubRip subtitles), 'vtt' (WebVTT captions), 'csv' (spreadsheet), "
                        "'txt' (plain text)"
                    ),
                    "enum": [f.value for f in OutputFormat],
                    "default": "json",
                },
                "filterEmpty": {
                    "type": "boolean",
                    "description": "Remove segments with empty or whitespace-only text (default: false)",
                    "default": False,
                },
                "mergeOverlaps": {
                    "type": "boolean",
                    "description": "Merge segments with overlapping timestamps (default: false)",
                    "default": False,
                },
                "removeSilence": {
                    "type": "boolean",
                    "description": "Remove silence markers like [silence], [pause], [Music] (default: false)",
                    "default": False,
                },
                "csvOptions": CSVFormatOptions.model_json_schema(by_alias=True),
                "txtOptions": TXTFormatOptions.model_json_schema(by_alias=True),
                "outputFile": {
                    "type": "string",
                    "description": (
                        "Optional file path to write the formatted output to. Parent directories "
                        "are created automatically and a summary is returned instead of the content."
                    ),
                },
                "preview": {
                    "oneOf": [{"type": "boolean"}, {"type": "integer", "minimum": 1}],
                    "description": (
                        "Truncate the response: true for the default 5000 character limit, "
                        "or a custom character limit"
                    ),
                },
                "allowAsr": {
                    "type": "boolean",
                    "description": "Fall back to speech recognition when the video has no captions",
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "get_video_info",
        "description": "Returns video metadata including title, channel, duration, and available captions",
        "inputSchema": {
            "type": "object",
            "properties": {"url": URL_PROPERTY},
            "required": ["url"],
        },
    },
]
