"""
Service layer components for the YouTube Media Downloader application.
"""

from .interfaces import (
    ProcessRunnerInterface,
    DownloadManagerInterface,
    ConfigManagerInterface
)

__all__ = [
    'ProcessRunnerInterface',
    'DownloadManagerInterface',
    'ConfigManagerInterface'
]
