"""
Application controller for the YouTube Media Downloader.
"""

from .application import MediaDownloaderApp

__all__ = ['MediaDownloaderApp']
