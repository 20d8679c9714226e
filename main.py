"""
Main entry point for the YouTube Media Downloader application.

Interrupts are not trapped here: while yt-dlp is running, Ctrl+C reaches
both this process and the child through the terminal's process group.
"""

from cli.main_cli import main as cli_main


def main():
    """Main entry point for the CLI application."""
    cli_main(prog_name='youtube-media-downloader')


if __name__ == "__main__":
    main()
