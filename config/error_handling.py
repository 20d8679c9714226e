"""
Error handling framework for the YouTube Media Downloader application.
"""

import logging
import time
from enum import Enum
from typing import Optional, Any, Dict

from config.logging_config import REPORTED_RECORD_ATTR


YTDLP_INSTALL_URL = "https://github.com/yt-dlp/yt-dlp#installation"


class ErrorType(Enum):
    """Types of errors that can occur in the application."""
    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"
    FILESYSTEM_ERROR = "filesystem_error"
    TOOL_NOT_FOUND = "tool_not_found"
    TOOL_EXIT_ERROR = "tool_exit_error"
    LAUNCH_ERROR = "launch_error"


class ErrorSeverity(Enum):
    """Severity levels for errors."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class DownloaderError(Exception):
    """Base exception class for YouTube Media Downloader errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.LAUNCH_ERROR,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.severity = severity
        self.details = details or {}
        self.original_exception = original_exception
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            'message': self.message,
            'error_type': self.error_type.value,
            'severity': self.severity.value,
            'details': self.details,
            'timestamp': self.timestamp,
            'original_exception': str(self.original_exception) if self.original_exception else None
        }


class ValidationError(DownloaderError):
    """Error related to input validation."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('severity', ErrorSeverity.LOW)
        super().__init__(message, error_type=ErrorType.VALIDATION_ERROR, **kwargs)


class ConfigurationError(DownloaderError):
    """Error related to configuration issues."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.CONFIGURATION_ERROR, **kwargs)


class FileSystemError(DownloaderError):
    """Error related to file system operations."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.FILESYSTEM_ERROR, **kwargs)


class ToolNotFoundError(DownloaderError):
    """The external yt-dlp executable could not be found on PATH."""

    def __init__(self, executable: str = "yt-dlp", **kwargs):
        message = f"{executable} is not installed or not in PATH. Please install it first."
        super().__init__(
            message,
            error_type=ErrorType.TOOL_NOT_FOUND,
            severity=ErrorSeverity.HIGH,
            **kwargs
        )
        self.executable = executable
        self.install_url = YTDLP_INSTALL_URL
        self.details['executable'] = executable
        self.details['suggested_solution'] = f"Install yt-dlp: {YTDLP_INSTALL_URL}"


class ToolExitError(DownloaderError):
    """The external tool ran but reported failure through its exit code."""

    def __init__(self, exit_code: int, executable: str = "yt-dlp", **kwargs):
        super().__init__(
            f"{executable} exited with code {exit_code}",
            error_type=ErrorType.TOOL_EXIT_ERROR,
            **kwargs
        )
        self.exit_code = exit_code
        self.details['exit_code'] = exit_code


class LaunchError(DownloaderError):
    """Any other failure while spawning the external tool."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_type=ErrorType.LAUNCH_ERROR, severity=ErrorSeverity.HIGH, **kwargs)


class ErrorHandler:
    """Centralized error classification and reporting. Nothing is retried."""

    FAILURE_EXIT_CODE = 1

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.error_counts: Dict[str, int] = {}

    def handle_error(self, error: Exception, context: str = "", displayed: bool = False) -> int:
        """
        Log an error that ended the run and translate it to a process exit code.

        Args:
            error: The exception that occurred
            context: Additional context about where the error occurred
            displayed: The caller shows the message to the user itself, so the
                record is kept off the console and only reaches the log file

        Returns:
            Exit code for the process
        """
        error_key = f"{type(error).__name__}:{context}"
        self.error_counts[error_key] = self.error_counts.get(error_key, 0) + 1

        extra = {
            'error_type': type(error).__name__,
            'context': context,
            REPORTED_RECORD_ATTR: displayed
        }
        if isinstance(error, DownloaderError):
            extra['error_details'] = error.details

        self.logger.error(f"Error in {context}: {str(error)}", extra=extra)
        return self.FAILURE_EXIT_CODE

    def classify_launch_error(self, error: Exception, executable: str = "yt-dlp") -> DownloaderError:
        """
        Classify an exception raised while spawning the external tool.

        Args:
            error: The original OS-level error
            executable: Name of the executable that was spawned

        Returns:
            Classified custom error
        """
        if isinstance(error, DownloaderError):
            return error

        if isinstance(error, FileNotFoundError):
            return ToolNotFoundError(executable, original_exception=error)

        return LaunchError(str(error), original_exception=error)

    def reset_error_counts(self) -> None:
        """Reset error counters."""
        self.error_counts.clear()
