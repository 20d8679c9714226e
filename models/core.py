"""
Core data models for the YouTube Media Downloader application.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum


YOUTUBE_URL_PATTERN = re.compile(r'^(https?://)?(www\.)?(youtube\.com|youtu\.be)/.+')

PLAYLIST_MARKERS = ('playlist', '&list=')


class DownloadStatus(Enum):
    """Status enumeration for download operations."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"


class MediaFormat(Enum):
    """Output formats the user can choose from."""
    AUDIO = "audio"
    VIDEO = "video"
    BOTH = "both"

    @property
    def label(self) -> str:
        """Human readable label shown in the format menu."""
        return _FORMAT_LABELS[self]

    @classmethod
    def from_value(cls, value: str) -> 'MediaFormat':
        """
        Resolve a format from its value, case-insensitively.

        Raises:
            ValueError: If the value does not name a known format
        """
        if isinstance(value, cls):
            return value
        if not value or not isinstance(value, str):
            raise ValueError("Format is required")

        normalized = value.strip().lower()
        for media_format in cls:
            if media_format.value == normalized:
                return media_format

        valid = ', '.join(f.value for f in cls)
        raise ValueError(f"Unknown format '{value}'. Choose one of: {valid}")


_FORMAT_LABELS = {
    MediaFormat.AUDIO: "Audio only (MP3)",
    MediaFormat.VIDEO: "Video (MP4)",
    MediaFormat.BOTH: "Both (video + MP3 audio)",
}


def is_youtube_url(url: str) -> bool:
    """Loose syntactic check for youtube.com / youtu.be URLs."""
    if not url or not isinstance(url, str):
        return False
    return YOUTUBE_URL_PATTERN.match(url) is not None


def is_playlist_url(url: str) -> bool:
    """Check whether the URL should be downloaded in playlist mode."""
    return any(marker in url for marker in PLAYLIST_MARKERS)


@dataclass
class DownloadConfig:
    """Configuration settings for download operations."""
    output_directory: str = "./downloads"
    default_format: str = "audio"
    ytdlp_path: str = "yt-dlp"
    audio_format: str = "mp3"
    audio_quality: str = "0"
    video_format_selector: str = "best[ext=mp4]"
    output_template: str = "%(playlist_index)03d-%(title)s.%(ext)s"
    audio_subdirectory: str = "audio"
    write_auto_subs: bool = True

    def __post_init__(self):
        """Normalize configuration values after initialization."""
        self.audio_quality = str(self.audio_quality)


@dataclass
class DownloadRequest:
    """A validated user request: what to fetch, in which form, and where."""
    url: str
    media_format: MediaFormat
    destination: str

    def __post_init__(self):
        """Validate request values after initialization."""
        if not self.url or not self.url.strip():
            raise ValueError("URL is required")
        self.url = self.url.strip()
        if not is_youtube_url(self.url):
            raise ValueError("Please enter a valid YouTube URL")

        self.media_format = MediaFormat.from_value(self.media_format)

        if not self.destination or not str(self.destination).strip():
            raise ValueError("Destination folder is required")
        self.destination = str(self.destination).strip()

    @property
    def is_playlist(self) -> bool:
        return is_playlist_url(self.url)


@dataclass
class Invocation:
    """One spawn-and-await cycle of the external tool."""
    args: List[str]
    output_directory: str
    label: str = ""
    returncode: Optional[int] = None
    duration: float = 0.0

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass
class DownloadResult:
    """Result of a download operation."""
    request: DownloadRequest
    success: bool = False
    invocations: List[Invocation] = field(default_factory=list)
    error_message: str = ""
    download_time: float = 0.0
    status: DownloadStatus = DownloadStatus.PENDING

    def add_invocation(self, invocation: Invocation) -> None:
        """Record an invocation that was started."""
        self.invocations.append(invocation)

    def mark_success(self, download_time: float) -> None:
        """Mark the download as successful."""
        self.success = True
        self.download_time = download_time
        self.status = DownloadStatus.COMPLETED
        self.error_message = ""

    def mark_failure(self, error_message: str) -> None:
        """Mark the download as failed."""
        self.success = False
        self.error_message = error_message
        self.status = DownloadStatus.FAILED
