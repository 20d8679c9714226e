"""
Configuration management for the YouTube Media Downloader application.
"""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Any, Optional, Union
import logging

from models.core import DownloadConfig, MediaFormat
from config.error_handling import ConfigurationError, ValidationError


class ConfigManager:
    """Manages configuration loading, validation, and merging."""

    DEFAULT_CONFIG_FILENAME = "youtube_media_downloader_config.json"

    VALID_AUDIO_FORMATS = ['mp3', 'm4a', 'opus', 'wav', 'flac', 'aac', 'vorbis']

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize ConfigManager.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._default_config = self._create_default_config()

    def _create_default_config(self) -> Dict[str, Any]:
        """Create default configuration dictionary."""
        return asdict(DownloadConfig())

    def load_config(self, config_path: Union[str, Path]) -> DownloadConfig:
        """
        Load configuration from JSON file.

        Args:
            config_path: Path to configuration file

        Returns:
            DownloadConfig instance

        Raises:
            ConfigurationError: If configuration file cannot be loaded or is invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            self.logger.debug(f"Configuration file not found, using defaults: {config_path}")
            return self._create_download_config(self._default_config)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file {config_path}: {str(e)}",
                details={"file_path": str(config_path), "json_error": str(e)}
            )
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {str(e)}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object",
                details={"file_path": str(config_path)}
            )

        self.logger.info(f"Loaded configuration from: {config_path}")

        merged_config = self._merge_configs(self._default_config, config_data)

        try:
            self._validate_config(merged_config)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e.message}",
                details={"file_path": str(config_path)},
                original_exception=e
            )

        return self._create_download_config(merged_config)

    def save_config(self, config: DownloadConfig, config_path: Union[str, Path]) -> None:
        """
        Save configuration to JSON file.

        Raises:
            ConfigurationError: If configuration cannot be saved
        """
        self._write_json(asdict(config), Path(config_path))
        self.logger.info(f"Configuration saved to: {config_path}")

    def save_default_config(self, output_path: Union[str, Path]) -> None:
        """
        Generate and save default configuration file.

        Raises:
            ConfigurationError: If default configuration cannot be saved
        """
        self.save_config(self._create_download_config(self._default_config), output_path)

    def merge_cli_args(self, config: DownloadConfig, cli_args: Dict[str, Any]) -> DownloadConfig:
        """
        Merge CLI arguments with existing configuration.
        CLI arguments take precedence over configuration file values.

        Args:
            config: Base DownloadConfig instance
            cli_args: Dictionary of CLI arguments

        Returns:
            New DownloadConfig instance with merged values
        """
        config_dict = asdict(config)

        cli_mapping = {
            'output': 'output_directory',
            'format': 'default_format',
            'ytdlp_path': 'ytdlp_path',
            'audio_format': 'audio_format',
            'audio_quality': 'audio_quality',
            'auto_subs': 'write_auto_subs'
        }

        for cli_key, config_key in cli_mapping.items():
            if cli_key in cli_args and cli_args[cli_key] is not None:
                value = cli_args[cli_key]
                config_dict[config_key] = str(value) if isinstance(value, Path) else value
                self.logger.debug(f"CLI override: {config_key} = {value}")

        self._validate_config(config_dict)

        return self._create_download_config(config_dict)

    def _write_json(self, data: Dict[str, Any], path: Path) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {path}: {str(e)}",
                details={"file_path": str(path)},
                original_exception=e
            )

    def _merge_configs(self, base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge two configuration dictionaries.

        Args:
            base_config: Base configuration dictionary
            override_config: Configuration to merge on top

        Returns:
            Merged configuration dictionary
        """
        merged = base_config.copy()

        for key, value in override_config.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_configs(merged[key], value)
            elif key in base_config:
                merged[key] = value
            else:
                self.logger.warning(f"Ignoring unknown configuration key: {key}")

        return merged

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration dictionary.

        Raises:
            ValidationError: If configuration is invalid
        """
        for field_name in self._default_config:
            if field_name not in config:
                raise ValidationError(f"Missing required configuration field: {field_name}")

        string_fields = [
            'output_directory', 'default_format', 'ytdlp_path', 'audio_format',
            'video_format_selector', 'output_template', 'audio_subdirectory'
        ]
        for field_name in string_fields:
            value = config[field_name]
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{field_name} must be a non-empty string")

        try:
            MediaFormat.from_value(config['default_format'])
        except ValueError as e:
            raise ValidationError(f"default_format: {e}")

        if config['audio_format'] not in self.VALID_AUDIO_FORMATS:
            raise ValidationError(
                f"audio_format must be one of: {', '.join(self.VALID_AUDIO_FORMATS)}"
            )

        quality = config['audio_quality']
        if isinstance(quality, bool) or not str(quality).isdecimal() or not 0 <= int(quality) <= 10:
            raise ValidationError("audio_quality must be an integer between 0 (best) and 10 (worst)")

        if not isinstance(config['write_auto_subs'], bool):
            raise ValidationError("write_auto_subs must be a boolean")

        template = config['output_template']
        if '/' in template or (os.sep != '/' and os.sep in template):
            raise ValidationError("output_template must be a file name pattern, not a path")

        if '/' in config['audio_subdirectory'] or config['audio_subdirectory'] in ('.', '..'):
            raise ValidationError("audio_subdirectory must be a single directory name")

    def _create_download_config(self, config_dict: Dict[str, Any]) -> DownloadConfig:
        """Create DownloadConfig instance from dictionary."""
        return DownloadConfig(
            output_directory=config_dict['output_directory'],
            default_format=MediaFormat.from_value(config_dict['default_format']).value,
            ytdlp_path=config_dict['ytdlp_path'],
            audio_format=config_dict['audio_format'],
            audio_quality=config_dict['audio_quality'],
            video_format_selector=config_dict['video_format_selector'],
            output_template=config_dict['output_template'],
            audio_subdirectory=config_dict['audio_subdirectory'],
            write_auto_subs=config_dict['write_auto_subs']
        )

    def get_config_path(self, config_dir: Optional[Union[str, Path]] = None) -> Path:
        """
        Get the default configuration file path.

        Args:
            config_dir: Optional directory for configuration file

        Returns:
            Path to configuration file
        """
        if config_dir is None:
            config_dir = Path.cwd()
        else:
            config_dir = Path(config_dir)

        return config_dir / self.DEFAULT_CONFIG_FILENAME
