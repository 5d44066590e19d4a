"""
Module for transcribing YouTube audio using Groq's API.

Used as a fallback when a video has no caption track at all.
"""

import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from groq import Groq
from pytubefix import YouTube

from transcript_pro.config import config
from transcript_pro.models.schemas import TranscriptionConfig, TranscriptSegment, TranscriptSource
from transcript_pro.utils.error_handling import MissingAPIKey, TranscriptUnavailable
from transcript_pro.utils.logger import logging


class AudioTranscriber:
    """Class to handle speech recognition of a video's audio track."""

    def __init__(
        self, transcribe_config: TranscriptionConfig, api_key: Optional[str] = None
    ):
        """
        Initialize the transcriber with API key.

        Args:
            transcribe_config: Model and decoding settings
            api_key: Groq API key (if None, will try to get from environment)
        """
        self.transcribe_config = transcribe_config
        self.api_key = api_key or os.getenv("GROQ_API_KEY")
        if not self.api_key:
            raise MissingAPIKey(
                "Groq API key is required for speech recognition. Set GROQ_API_KEY in .env file or pass directly."
            )

        self.client = Groq(api_key=self.api_key)

    def download_audio(self, yt: YouTube) -> str:
        """
        Download the best audio stream of a video.

        Returns:
            Path to the downloaded audio file
        """
        audio_stream = yt.streams.filter(only_audio=True).order_by('abr').last()
        if audio_stream is None:
            raise TranscriptUnavailable(f"No audio stream available for video {yt.video_id}")

        output_dir = Path(config.DOWNLOADS_DIR)
        output_dir.mkdir(parents=True, exist_ok=True)
        filename = f"{int(time.time())}_{yt.video_id}.mp3"

        logging.info(f"Downloading audio for speech recognition: {yt.video_id}")
        return audio_stream.download(output_path=str(output_dir), filename=filename)

    def transcribe_file(self, audio_path: str, lang: str) -> List[TranscriptSegment]:
        """
        Transcribe an audio file into speech-recognized segments.

        Args:
            audio_path: Path to the audio file
            lang: Language code stored on the segments

        Returns:
            Transcript segments in time order
        """
        if not os.path.exists(audio_path) or not os.path.isfile(audio_path):
            raise FileNotFoundError(f"Audio file not found at {audio_path}")

        logging.info(f"Transcribing audio file: {audio_path}")
        audio_file_path = Path(audio_path)

        with open(audio_path, "rb") as audio_file:
            transcription = self.client.audio.transcriptions.create(
                file=(audio_file_path.name, audio_file.read()),
                model=self.transcribe_config.model,
                prompt=self.transcribe_config.prompt,
                language=self.transcribe_config.language or lang,
                response_format=self.transcribe_config.response_format,
                temperature=self.transcribe_config.temperature,
            )

        if hasattr(transcription, "model_dump"):
            data = transcription.model_dump()
        else:
            data = dict(transcription)

        segments = segments_from_verbose_json(data, lang)
        logging.info(f"Transcription complete: {len(segments)} segments")
        return segments

    def transcribe(self, yt: YouTube, lang: str) -> List[TranscriptSegment]:
        """Download a video's audio, transcribe it and remove the audio file."""
        audio_path = self.download_audio(yt)
        try:
            return self.transcribe_file(audio_path, lang)
        finally:
            if os.path.exists(audio_path):
                os.remove(audio_path)


def segments_from_verbose_json(data: Dict[str, Any], lang: str) -> List[TranscriptSegment]:
    """Map the ``segments`` of a verbose_json transcription to transcript segments."""
    segments = []
    for item in data.get("segments") or []:
        start = float(item.get("start", 0.0))
        segments.append(TranscriptSegment(
            start=start,
            end=max(float(item.get("end", start)), start),
            text=str(item.get("text", "")).strip(),
            lang=lang,
            source=TranscriptSource.SPEECH_RECOGNIZED,
        ))
    return segments
