"""
YouTube caption and metadata client.
"""

import re
from typing import Any, Dict, List
from urllib.error import URLError

from retry import retry
from pytubefix import YouTube
from pytubefix.exceptions import VideoUnavailable as PytubeVideoUnavailable

from transcript_pro.config import config
from transcript_pro.core.timestamps import format_duration
from transcript_pro.models.schemas import CaptionTrack, TranscriptSegment, TranscriptSource, VideoInfo
from transcript_pro.utils.error_handling import InvalidVideoURL, TranscriptUnavailable, VideoUnavailable
from transcript_pro.utils.logger import logging

# Auto-generated caption tracks are published under an "a." prefixed code
AUTO_TRACK_PREFIX = "a."

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?(?:.*&)?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/|youtube\.com/live/)([0-9A-Za-z_-]{11})"),
    re.compile(r"^([0-9A-Za-z_-]{11})$"),
]


def extract_video_id(url: str) -> str:
    """
    Extract the video ID from a YouTube URL or a bare video ID.

    Raises:
        InvalidVideoURL: If no video ID can be found
    """
    url = (url or "").strip()
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    raise InvalidVideoURL("Invalid YouTube URL or video ID")


def track_source(code: str) -> TranscriptSource:
    """Source tag implied by a caption track code."""
    if code.startswith(AUTO_TRACK_PREFIX):
        return TranscriptSource.AUTO_GENERATED
    return TranscriptSource.MANUAL


def track_language(code: str) -> str:
    """Language of a caption track code, without the auto-generated prefix."""
    if code.startswith(AUTO_TRACK_PREFIX):
        return code[len(AUTO_TRACK_PREFIX):]
    return code


@retry(exceptions=(URLError, ConnectionError, TimeoutError),
       tries=config.CAPTION_FETCH_RETRIES,
       delay=config.CAPTION_FETCH_RETRY_DELAY,
       backoff=config.CAPTION_FETCH_BACKOFF,
       logger=logging)
def download_json3(caption: Any) -> Dict[str, Any]:
    """Download the json3 document of a pytubefix caption track."""
    return caption.json_captions


def parse_json3(data: Dict[str, Any], lang: str, source: TranscriptSource) -> List[TranscriptSegment]:
    """
    Convert YouTube json3 caption data into transcript segments.

    Each event holds one or more text pieces. A piece starts at the event
    start plus its own offset and ends where the next piece starts, or at
    the end of the event for the last piece.

    Args:
        data: Parsed json3 document (``{"events": [...]}``)
        lang: Language code stored on every segment
        source: Source tag stored on every segment

    Returns:
        Segments in caption order
    """
    segments = []

    for event in data.get("events", []):
        pieces = event.get("segs") or []
        if not pieces:
            continue

        event_start = event.get("tStartMs", 0)
        event_end = event_start + event.get("dDurationMs", 0)

        for index, piece in enumerate(pieces):
            start_ms = event_start + piece.get("tOffsetMs", 0)
            if index + 1 < len(pieces) and "tOffsetMs" in pieces[index + 1]:
                end_ms = event_start + pieces[index + 1]["tOffsetMs"]
            else:
                end_ms = event_end

            segments.append(TranscriptSegment(
                start=start_ms / 1000,
                end=max(end_ms, start_ms) / 1000,
                text=piece.get("utf8", "").strip(),
                lang=lang,
                source=source,
            ))

    return segments


class YouTubeTranscriptClient:
    """Class to fetch captions and metadata for a single YouTube video."""

    def __init__(self, url: str):
        """
        Initialize the client for a video.

        Args:
            url: YouTube video URL or video ID
        """
        self.video_id = extract_video_id(url)
        self.url = f"https://www.youtube.com/watch?v={self.video_id}"
        self.yt = YouTube(self.url)

    def _caption_index(self) -> Dict[str, Any]:
        try:
            return {caption.code: caption for caption in self.yt.captions}
        except PytubeVideoUnavailable as e:
            raise VideoUnavailable(f"Video {self.video_id} is unavailable: {e}") from e

    def list_tracks(self) -> List[CaptionTrack]:
        """List the caption tracks available for the video."""
        tracks = [
            CaptionTrack(lang=track_language(code), name=caption.name, source=track_source(code))
            for code, caption in self._caption_index().items()
        ]
        logging.info(f"Found {len(tracks)} caption tracks for video {self.video_id}")
        return tracks

    def get_segments(self, lang: str = "en") -> List[TranscriptSegment]:
        """
        Fetch the transcript segments for a language.

        The manually uploaded track is preferred; the auto-generated track
        is used when there is none.

        Raises:
            TranscriptUnavailable: If no track exists for the language or it is empty
        """
        captions = self._caption_index()
        caption = captions.get(lang) or captions.get(f"{AUTO_TRACK_PREFIX}{lang}")
        if caption is None:
            available = ", ".join(sorted(captions)) or "none"
            raise TranscriptUnavailable(
                f"No '{lang}' captions for video {self.video_id} (available: {available})"
            )

        logging.info(f"Fetching '{caption.code}' captions for video {self.video_id}")
        segments = parse_json3(download_json3(caption), track_language(caption.code), track_source(caption.code))

        if not segments:
            raise TranscriptUnavailable("No transcript segments found")
        return segments

    def get_video_info(self) -> VideoInfo:
        """Extract metadata from the YouTube video, including its caption tracks."""
        try:
            length = int(self.yt.length or 0)
            info = VideoInfo(
                video_id=self.video_id,
                title=self.yt.title or "No title",
                author=self.yt.author or "Unknown author",
                channel_id=self.yt.channel_id,
                length_seconds=length,
                duration=format_duration(length),
            )
        except PytubeVideoUnavailable as e:
            raise VideoUnavailable(f"Video {self.video_id} is unavailable: {e}") from e

        # Caption details are optional; metadata is still useful without them
        try:
            info.captions_available = self.list_tracks()
        except Exception as e:
            logging.warning(f"Could not list caption tracks for {self.video_id}: {str(e)}")
            info.captions_available = []

        return info
