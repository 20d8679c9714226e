"""
Interface definitions for CLI components.
"""

from abc import ABC, abstractmethod
from models.core import MediaFormat, is_youtube_url


class PromptInterface(ABC):
    """Interface for collecting a download request from the user."""

    @abstractmethod
    def display_banner(self) -> None:
        """Show the welcome banner."""
        pass

    @abstractmethod
    def prompt_url(self) -> str:
        """Ask for a video or playlist URL until a valid one is entered."""
        pass

    @abstractmethod
    def prompt_format(self, default: MediaFormat = MediaFormat.AUDIO) -> MediaFormat:
        """Ask which output format to produce."""
        pass

    @abstractmethod
    def prompt_destination(self, default: str = "./downloads") -> str:
        """Ask for the destination folder."""
        pass

    @abstractmethod
    def display_error(self, error_message: str) -> None:
        """Display error message to the user."""
        pass

    @abstractmethod
    def display_success(self, message: str) -> None:
        """Display success message to the user."""
        pass


class ArgumentValidator:
    """Validates and normalizes user input."""

    @staticmethod
    def validate_url(url: str) -> bool:
        """Validate YouTube URL format."""
        return is_youtube_url(url)

    @staticmethod
    def validate_output_path(path: str) -> bool:
        """A destination only has to be a non-blank string."""
        if not path or not isinstance(path, str):
            return False
        return bool(path.strip())

    @staticmethod
    def parse_format_choice(choice: str) -> MediaFormat:
        """
        Resolve a menu answer, given either as its 1-based number or its name.

        Raises:
            ValueError: If the answer matches no option
        """
        options = list(MediaFormat)
        answer = (choice or "").strip()
        if answer.isdecimal():
            index = int(answer)
            if 1 <= index <= len(options):
                return options[index - 1]
            raise ValueError(f"Please choose a number between 1 and {len(options)}")
        return MediaFormat.from_value(answer)
