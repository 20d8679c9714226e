"""
Main CLI implementation using Click framework for the YouTube Media Downloader.
"""

import click
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from models.core import MediaFormat
from config import ConfigManager, setup_logging, get_logger
from config.error_handling import (
    ConfigurationError, ValidationError, DownloaderError, YTDLP_INSTALL_URL
)
from config.filesystem_validator import FileSystemValidator
from cli.interfaces import PromptInterface, ArgumentValidator


FORMAT_CHOICES = [media_format.value for media_format in MediaFormat]


class InteractivePrompter(PromptInterface):
    """Collects a download request through click prompts."""

    def display_banner(self) -> None:
        click.echo('==============================')
        click.echo(' ~~ YOUTUBE MEDIA DOWNLOADER ~~ ')
        click.echo('==============================\n')
        click.echo(' Install yt-dlp:')
        click.echo(f' {YTDLP_INSTALL_URL} ')
        click.echo('==============================\n')

    def prompt_url(self) -> str:
        return click.prompt(
            'Enter YouTube video or playlist URL',
            value_proc=_url_value_proc
        )

    def prompt_format(self, default: MediaFormat = MediaFormat.AUDIO) -> MediaFormat:
        options = list(MediaFormat)
        click.echo('Output format:')
        for number, media_format in enumerate(options, 1):
            click.echo(f'  {number}) {media_format.label}')

        return click.prompt(
            'Choose output format',
            default=str(options.index(default) + 1),
            value_proc=_format_value_proc
        )

    def prompt_destination(self, default: str = "./downloads") -> str:
        return click.prompt(
            'Enter destination folder',
            default=default,
            value_proc=_destination_value_proc
        )

    def display_error(self, error_message: str) -> None:
        click.echo(click.style(f"\n✗ Error: {error_message}", fg='red'), err=True)

    def display_success(self, message: str) -> None:
        click.echo(click.style(message, fg='green'))


def _url_value_proc(value: str) -> str:
    value = value.strip()
    if not value:
        raise click.BadParameter('URL is required')
    if not ArgumentValidator.validate_url(value):
        raise click.BadParameter('Please enter a valid YouTube URL')
    return value


def _format_value_proc(value: str) -> MediaFormat:
    try:
        return ArgumentValidator.parse_format_choice(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _destination_value_proc(value: str) -> str:
    if not ArgumentValidator.validate_output_path(value):
        raise click.BadParameter('Destination folder is required')
    return value.strip()


# Global CLI instance
cli_app = InteractivePrompter()
config_manager = ConfigManager()
logger = get_logger(__name__)


@click.group(invoke_without_command=True)
@click.option('--config', '-c',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Path to configuration file')
@click.option('--format', '-f', 'media_format',
              type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
              help='Output format; skips the format prompt')
@click.option('--log-level',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
              default='INFO',
              help='Set logging level for the log file')
@click.option('--log-file',
              type=str,
              help='Log file name inside the log directory')
@click.option('--log-dir',
              type=click.Path(file_okay=False, path_type=Path),
              default='./logs',
              show_default=True,
              help='Directory for log files')
@click.pass_context
def main(ctx, config, media_format, log_level, log_file, log_dir):
    """
    YouTube Media Downloader - fetch audio, video or both with yt-dlp.

    Run without a command to be prompted for a URL, an output format and a
    destination folder. All downloading and transcoding is done by yt-dlp,
    which must be installed and on PATH.

    \b
    EXAMPLES:

    Interactive mode:
        youtube-media-downloader

    Interactive, audio only (no format prompt):
        youtube-media-downloader --format audio

    Non-interactive download:
        youtube-media-downloader download "https://youtu.be/dQw4w9WgXcQ" -f both -o ./out

    \b
    CONFIGURATION:

    Generate default configuration file:
        youtube-media-downloader init-config

    Validate configuration:
        youtube-media-downloader validate-config
    """
    ctx.ensure_object(dict)

    setup_logging(log_level=log_level, log_file=log_file, log_dir=str(log_dir))

    # Loaded by the commands that download, so a broken file can still be
    # replaced with init-config or inspected with validate-config.
    ctx.obj['config_path'] = config

    if ctx.invoked_subcommand is None:
        _run_interactive(_load_app(config), media_format)


def _load_app(config_path: Optional[Path], cli_args: Optional[Dict[str, Any]] = None):
    """Create the application with its configuration, or exit 1 if the configuration is invalid."""
    from core.application import MediaDownloaderApp

    app = MediaDownloaderApp()
    try:
        app.load_configuration(config_path, cli_args)
    except (ConfigurationError, ValidationError) as e:
        cli_app.display_error(f"Configuration error: {e.message}")
        sys.exit(1)
    return app


def _run_interactive(app, media_format: Optional[str]) -> None:
    """Prompt for the request, then download. Ctrl+C while prompting cancels cleanly."""
    config = app.config
    cli_app.display_banner()

    try:
        url = cli_app.prompt_url()
        if media_format:
            selected_format = MediaFormat.from_value(media_format)
        else:
            selected_format = cli_app.prompt_format(MediaFormat.from_value(config.default_format))
        destination = cli_app.prompt_destination(config.output_directory)
    except click.Abort:
        logger.info("Operation cancelled by user")
        click.echo('\nOperation cancelled.')
        sys.exit(0)

    _execute_download(app, url, selected_format, destination)


def _execute_download(app, url: str, media_format: MediaFormat, destination: str) -> None:
    """Run the download and translate its outcome into an exit code."""
    try:
        request = app.build_request(url, media_format, destination)
        click.echo('\nStarting download...\n')
        app.download(request)
    except DownloaderError as e:
        app.error_handler.handle_error(e, 'download', displayed=True)
        cli_app.display_error(e.message)
        sys.exit(1)
    except Exception as e:
        app.error_handler.handle_error(e, 'download', displayed=True)
        cli_app.display_error(str(e))
        sys.exit(1)

    cli_app.display_success('\n✓ Download completed successfully!\n')


@main.command()
@click.argument('url')
@click.option('--format', '-f', 'media_format',
              type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
              help='Output format (defaults to the configured default_format)')
@click.option('--output', '-o',
              type=click.Path(file_okay=False, path_type=Path),
              help='Destination folder (defaults to the configured output_directory)')
@click.pass_context
def download(ctx, url, media_format, output):
    """
    Download URL without prompting.

    \b
    EXAMPLES:

    Audio only:
        youtube-media-downloader download "https://youtu.be/dQw4w9WgXcQ"

    Playlist as video plus an audio copy:
        youtube-media-downloader download "https://www.youtube.com/playlist?list=PLAYLIST_ID" -f both
    """
    if not ArgumentValidator.validate_url(url):
        cli_app.display_error("Please enter a valid YouTube URL")
        sys.exit(1)

    app = _load_app(ctx.obj['config_path'], {'format': media_format, 'output': output})
    config = app.config

    _execute_download(
        app,
        url,
        MediaFormat.from_value(config.default_format),
        config.output_directory
    )


@main.command()
@click.option('--output', '-o',
              type=click.Path(dir_okay=False, path_type=Path),
              default=f'./{ConfigManager.DEFAULT_CONFIG_FILENAME}',
              show_default=True,
              help='Output path for configuration file')
def init_config(output):
    """
    Generate a default configuration file.

    The file sets the folder, default format and yt-dlp options used by
    every download. audio_format replaces mp3 as the codec of every audio
    download (also the audio copy made by "both"), and audio_quality,
    video_format_selector and output_template change the yt-dlp arguments
    in the same way. The generated file keeps the defaults: MP3 at the best
    quality and MP4 video.
    """
    try:
        config_manager.save_default_config(output)
        cli_app.display_success(f"Default configuration saved to: {output}")
        click.echo("You can now edit this file to customize your settings.")

    except ConfigurationError as e:
        cli_app.display_error(f"Failed to create configuration file: {e.message}")
        sys.exit(1)


@main.command()
@click.option('--config', '-c',
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Path to configuration file to validate')
@click.pass_context
def validate_config(ctx, config):
    """Validate a configuration file and check that yt-dlp is reachable."""
    from services.process_runner import SubprocessRunner

    if not config:
        config = ctx.obj.get('config_path') or config_manager.get_config_path()

    try:
        loaded_config = config_manager.load_config(config)
    except ConfigurationError as e:
        cli_app.display_error(f"Configuration validation failed: {e.message}")
        sys.exit(1)

    cli_app.display_success(f"Configuration is valid: {config}")

    output_directory = loaded_config.output_directory
    writable = FileSystemValidator().is_writable(output_directory)
    available = SubprocessRunner(loaded_config.ytdlp_path).is_available()

    click.echo("\nConfiguration Summary:")
    click.echo(f"  Output Directory: {output_directory}"
               f"{'' if writable else ' (missing or not writable, created on download)'}")
    click.echo(f"  Default Format: {loaded_config.default_format}")
    click.echo(f"  Audio: {loaded_config.audio_format} (quality {loaded_config.audio_quality})")
    click.echo(f"  Video Selector: {loaded_config.video_format_selector}")
    click.echo(f"  Auto Subtitles (both): {loaded_config.write_auto_subs}")
    click.echo(f"  yt-dlp: {loaded_config.ytdlp_path} ({'found' if available else 'NOT FOUND on PATH'})")


if __name__ == '__main__':
    main()
