"""
Configuration management components for the YouTube Media Downloader application.
"""

from .logging_config import setup_logging, get_logger
from .error_handling import ErrorHandler, DownloaderError
from .config_manager import ConfigManager

__all__ = ['setup_logging', 'get_logger', 'ErrorHandler', 'DownloaderError', 'ConfigManager']
