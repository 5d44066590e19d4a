"""
Data models for the YouTube transcript server.
"""
from enum import Enum
from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TranscriptSource(str, Enum):
    """Where a transcript segment came from."""
    MANUAL = "manual"
    AUTO_GENERATED = "auto-generated"
    WEB_EXTRACTED = "web-extracted"
    SPEECH_RECOGNIZED = "speech-recognized"


class OutputFormat(str, Enum):
    """Output formats understood by the pipeline."""
    JSON = "json"
    SRT = "srt"
    VTT = "vtt"
    CSV = "csv"
    TXT = "txt"


class TranscriptSegment(BaseModel):
    """A timestamped span of transcript text."""
    start: float
    end: float
    text: str
    lang: str
    source: TranscriptSource

    model_config = ConfigDict(frozen=True)


class CSVFormatOptions(BaseModel):
    """Options for the CSV renderer."""
    timestamp_format: Literal["seconds", "hms", "hms-millis"] = "seconds"
    include_bom: bool = Field(default=True, alias="includeBOM")
    include_header: bool = True

    model_config = ConfigDict(
        frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True
    )


class TXTFormatOptions(BaseModel):
    """Options for the plain text renderer."""
    mode: Literal["plain", "timestamped", "paragraph"] = "plain"
    include_metadata: bool = False
    paragraph_gap: float = Field(default=2.0, ge=0)
    timestamp_format: Literal["hms", "hms-millis"] = "hms"

    model_config = ConfigDict(
        frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True
    )


class PreprocessingFlags(BaseModel):
    """Which preprocessors to run before rendering."""
    remove_silence: bool = False
    filter_empty: bool = False
    merge_overlaps: bool = False

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CaptionTrack(BaseModel):
    """A caption track available for a video."""
    lang: str
    name: Optional[str] = None
    source: TranscriptSource


class VideoInfo(BaseModel):
    """Video metadata returned by the get_video_info tool."""
    video_id: str
    title: str
    author: str
    channel_id: Optional[str] = None
    length_seconds: int = 0
    duration: str = "0s"
    captions_available: List[CaptionTrack] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TranscriptionConfig(BaseModel):
    """Configuration for speech recognition."""
    model: str = "whisper-large-v3-turbo"
    language: Optional[str] = None
    prompt: Optional[str] = None
    response_format: str = "verbose_json"
    temperature: float = 0.0
