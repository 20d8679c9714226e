"""
Main application controller for the YouTube Media Downloader.
"""

from typing import Optional, Dict, Any, Union
from pathlib import Path

from models.core import DownloadConfig, DownloadRequest, DownloadResult, MediaFormat
from services.interfaces import DownloadManagerInterface, ConfigManagerInterface
from services.download_manager import DownloadManager
from config import ConfigManager
from config.logging_config import get_logger
from config.error_handling import ErrorHandler, ValidationError


class MediaDownloaderApp:
    """
    Application controller that ties configuration to the download manager.

    Logging is configured by the CLI before the controller is created.
    """

    def __init__(
        self,
        config: Optional[DownloadConfig] = None,
        download_manager: Optional[DownloadManagerInterface] = None,
        config_manager: Optional[ConfigManagerInterface] = None
    ):
        """
        Initialize the application.

        Args:
            config: Download configuration; defaults are used when omitted
            download_manager: Download manager implementation
            config_manager: Configuration manager implementation
        """
        self.logger = get_logger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.config = config or DownloadConfig()
        self.config_manager = config_manager or ConfigManager()
        self.download_manager = download_manager or DownloadManager(self.config)

        self.logger.debug("YouTube Media Downloader application initialized")

    def load_configuration(
        self,
        config_path: Optional[Union[str, Path]] = None,
        cli_args: Optional[Dict[str, Any]] = None
    ) -> DownloadConfig:
        """
        Load configuration from file and merge CLI overrides.

        Rebuilds the default download manager so it uses the new configuration.

        Raises:
            ConfigurationError: If the configuration file is invalid
            ValidationError: If a CLI override is invalid
        """
        if config_path is None:
            config_path = self.config_manager.get_config_path()

        config = self.config_manager.load_config(config_path)
        if cli_args:
            config = self.config_manager.merge_cli_args(config, cli_args)

        self.config = config
        if isinstance(self.download_manager, DownloadManager):
            self.download_manager = DownloadManager(config)
        return config

    def build_request(self, url: str, media_format: Union[str, MediaFormat], destination: str) -> DownloadRequest:
        """
        Build a validated request.

        Raises:
            ValidationError: If any field is invalid
        """
        try:
            return DownloadRequest(url=url, media_format=media_format, destination=destination)
        except ValueError as e:
            raise ValidationError(str(e), original_exception=e)

    def download(self, request: DownloadRequest) -> DownloadResult:
        """
        Run a download request.

        Raises:
            DownloaderError: If yt-dlp cannot be started or reports failure
        """
        mode = "playlist" if request.is_playlist else "single video"
        self.logger.info(
            f"Starting {request.media_format.value} download ({mode}): "
            f"{request.url} -> {request.destination}"
        )
        result = self.download_manager.download(request)
        self.logger.info(
            f"Download finished after {len(result.invocations)} invocation(s) "
            f"in {result.download_time:.1f}s"
        )
        return result
