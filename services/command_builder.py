"""
Builds yt-dlp argument vectors from download requests.
"""

import os
from typing import List, Optional

from models.core import DownloadConfig, is_playlist_url


NO_PLAYLIST_FLAG = '--no-playlist'
YES_PLAYLIST_FLAG = '--yes-playlist'
AUTO_SUBS_FLAG = '--write-auto-subs'


class CommandBuilder:
    """Translates a URL and destination into yt-dlp command-line tokens."""

    def __init__(self, config: Optional[DownloadConfig] = None):
        self.config = config or DownloadConfig()

    def output_template(self, destination: str) -> str:
        """Output template rooted at the destination directory."""
        return os.path.join(destination, self.config.output_template)

    def audio_args(self, url: str, destination: str) -> List[str]:
        """
        Arguments for an audio-only download.

        Args:
            url: Video or playlist URL
            destination: Directory the audio files are written to

        Returns:
            Argument vector, without the executable
        """
        args = [
            '-x',
            '--audio-format', self.config.audio_format,
            '--audio-quality', str(self.config.audio_quality),
            '-o', self.output_template(destination),
            NO_PLAYLIST_FLAG,
            url
        ]
        return self.apply_playlist_mode(args, url)

    def video_args(self, url: str, destination: str, write_auto_subs: bool = False) -> List[str]:
        """
        Arguments for a video download.

        Args:
            url: Video or playlist URL
            destination: Directory the video files are written to
            write_auto_subs: Also fetch the auto-generated subtitle track

        Returns:
            Argument vector, without the executable
        """
        args = ['-f', self.config.video_format_selector]
        if write_auto_subs:
            args.append(AUTO_SUBS_FLAG)
        args.extend([
            '-o', self.output_template(destination),
            NO_PLAYLIST_FLAG,
            url
        ])
        return self.apply_playlist_mode(args, url)

    @staticmethod
    def apply_playlist_mode(args: List[str], url: str) -> List[str]:
        """Swap the single-item flag for --yes-playlist when the URL is a playlist."""
        if not is_playlist_url(url):
            return args

        args = [arg for arg in args if arg != NO_PLAYLIST_FLAG]
        args.append(YES_PLAYLIST_FLAG)
        return args
