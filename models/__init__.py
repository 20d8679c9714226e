"""
Data models for the YouTube Media Downloader application.
"""

from .core import (
    DownloadConfig, DownloadRequest, DownloadResult, DownloadStatus,
    Invocation, MediaFormat, is_youtube_url, is_playlist_url
)

__all__ = [
    'DownloadConfig',
    'DownloadRequest',
    'DownloadResult',
    'DownloadStatus',
    'Invocation',
    'MediaFormat',
    'is_youtube_url',
    'is_playlist_url'
]
