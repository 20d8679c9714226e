"""
Unit tests for the MediaDownloaderApp controller.
"""

import json
import shutil
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest

from core.application import MediaDownloaderApp
from config.error_handling import ConfigurationError, ToolExitError, ValidationError
from models.core import DownloadConfig, DownloadResult, MediaFormat
from services.download_manager import DownloadManager
from services.interfaces import DownloadManagerInterface


VIDEO_URL = 'https://youtu.be/abc123'


class TestMediaDownloaderApp:
    """Test cases for MediaDownloaderApp class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.temp_path = Path(self.temp_dir)
        self.download_manager = Mock(spec=DownloadManagerInterface)
        self.app = MediaDownloaderApp(download_manager=self.download_manager)

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_defaults(self):
        app = MediaDownloaderApp(config=DownloadConfig(ytdlp_path='/usr/local/bin/yt-dlp'))

        assert isinstance(app.download_manager, DownloadManager)
        assert app.download_manager.runner.executable == '/usr/local/bin/yt-dlp'

    def test_build_request(self):
        """A valid request is normalized into a DownloadRequest."""
        request = self.app.build_request(f"  {VIDEO_URL} ", 'Video', ' ./out ')

        assert request.url == VIDEO_URL
        assert request.media_format == MediaFormat.VIDEO
        assert request.destination == './out'

    def test_build_request_invalid(self):
        """Invalid fields surface as ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            self.app.build_request('https://example.com/watch', 'audio', './out')
        assert "valid YouTube URL" in str(exc_info.value)

        with pytest.raises(ValidationError):
            self.app.build_request(VIDEO_URL, 'audio', '  ')

    def test_download_delegates_to_manager(self):
        request = self.app.build_request(VIDEO_URL, 'both', './out')
        expected = DownloadResult(request=request)
        self.download_manager.download.return_value = expected

        assert self.app.download(request) is expected
        self.download_manager.download.assert_called_once_with(request)

    def test_download_propagates_errors(self):
        request = self.app.build_request(VIDEO_URL, 'audio', './out')
        self.download_manager.download.side_effect = ToolExitError(1)

        with pytest.raises(ToolExitError):
            self.app.download(request)

    def test_load_configuration_with_overrides(self):
        """File values and CLI overrides both reach the rebuilt download manager."""
        config_file = self.temp_path / 'config.json'
        config_file.write_text(json.dumps({'ytdlp_path': '/opt/yt-dlp', 'audio_format': 'opus'}))

        app = MediaDownloaderApp()
        config = app.load_configuration(config_file, {'format': 'video', 'output': None})

        assert config.audio_format == 'opus'
        assert config.default_format == 'video'
        assert app.config is config
        assert app.download_manager.runner.executable == '/opt/yt-dlp'

    def test_load_configuration_keeps_injected_manager(self):
        config_file = self.temp_path / 'missing.json'

        self.app.load_configuration(config_file)

        assert self.app.download_manager is self.download_manager

    def test_load_configuration_invalid_file(self):
        config_file = self.temp_path / 'broken.json'
        config_file.write_text('[]')

        with pytest.raises(ConfigurationError):
            self.app.load_configuration(config_file)
