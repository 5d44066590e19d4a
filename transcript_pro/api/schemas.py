from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from transcript_pro.models.schemas import CSVFormatOptions, PreprocessingFlags, TXTFormatOptions, TranscriptSegment


class ToolInput(BaseModel):
    """Arguments accepted by the transcript tools."""
    url: str
    lang: Optional[str] = None
    format: str = "json"
    filter_empty: bool = False
    merge_overlaps: bool = False
    remove_silence: bool = False
    csv_options: Optional[CSVFormatOptions] = None
    txt_options: Optional[TXTFormatOptions] = None
    output_file: Optional[str] = None
    preview: Optional[Union[bool, int]] = None
    allow_asr: Optional[bool] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator('url')
    def validate_url(cls, v):
        if not v or not v.strip():
            raise ValueError('Missing required parameter: url')
        return v.strip()

    @field_validator('preview')
    def validate_preview(cls, v):
        if isinstance(v, int) and not isinstance(v, bool) and v < 1:
            raise ValueError('preview limit must be at least 1')
        return v

    @property
    def flags(self) -> PreprocessingFlags:
        return PreprocessingFlags(
            remove_silence=self.remove_silence,
            filter_empty=self.filter_empty,
            merge_overlaps=self.merge_overlaps,
        )


class TimedTranscriptPreview(BaseModel):
    """Truncated view of a JSON transcript."""
    segments: List[TranscriptSegment]
    segments_shown: int
    total_segments: int
    segments_omitted: int
    truncated: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
