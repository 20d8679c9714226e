"""
Unit tests for error handling framework.
"""

import logging
from unittest.mock import Mock

from config.error_handling import (
    ErrorHandler, DownloaderError, ErrorType, ErrorSeverity, ValidationError,
    ConfigurationError, FileSystemError, ToolNotFoundError, ToolExitError,
    LaunchError, YTDLP_INSTALL_URL
)
from config.logging_config import REPORTED_RECORD_ATTR


class TestErrorHandler:
    """Test cases for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.mock_logger = Mock(spec=logging.Logger)
        self.error_handler = ErrorHandler(logger=self.mock_logger)

    def test_handle_error_returns_failure_exit_code(self):
        """Every handled error maps to exit code 1."""
        assert self.error_handler.handle_error(ToolExitError(1), "download") == 1
        assert self.error_handler.handle_error(RuntimeError("boom"), "download") == 1

    def test_handle_error_logs_with_context(self):
        """Errors are logged with their type and context."""
        error = ToolExitError(2)
        self.error_handler.handle_error(error, "download")

        self.mock_logger.error.assert_called_once()
        args, kwargs = self.mock_logger.error.call_args
        assert "Error in download" in args[0]
        assert "exited with code 2" in args[0]
        assert kwargs['extra']['error_type'] == 'ToolExitError'
        assert kwargs['extra']['error_details']['exit_code'] == 2
        assert kwargs['extra'][REPORTED_RECORD_ATTR] is False

    def test_handle_error_displayed_marks_record(self):
        """Errors the caller displays are marked so the console handler skips them."""
        self.error_handler.handle_error(LaunchError("Permission denied"), "download", displayed=True)

        _, kwargs = self.mock_logger.error.call_args
        assert kwargs['extra'][REPORTED_RECORD_ATTR] is True

    def test_error_counts(self):
        """Errors are counted per type and context."""
        self.error_handler.handle_error(ToolExitError(1), "download")
        self.error_handler.handle_error(ToolExitError(1), "download")

        assert self.error_handler.error_counts["ToolExitError:download"] == 2

        self.error_handler.reset_error_counts()
        assert self.error_handler.error_counts == {}

    def test_classify_file_not_found(self):
        """A missing executable is classified as ToolNotFoundError."""
        original = FileNotFoundError(2, "No such file or directory")
        classified = self.error_handler.classify_launch_error(original, "yt-dlp")

        assert isinstance(classified, ToolNotFoundError)
        assert classified.original_exception is original
        assert classified.error_type == ErrorType.TOOL_NOT_FOUND

    def test_classify_other_os_error(self):
        """Other launch errors keep their original message."""
        original = PermissionError(13, "Permission denied")
        classified = self.error_handler.classify_launch_error(original)

        assert isinstance(classified, LaunchError)
        assert classified.message == str(original)

    def test_classify_passes_through_known_errors(self):
        """Already classified errors are returned as-is."""
        error = ToolExitError(4)
        assert self.error_handler.classify_launch_error(error) is error


class TestCustomExceptions:
    """Test cases for custom exception classes."""

    def test_base_error_to_dict(self):
        error = DownloaderError(
            "Test error",
            details={'key': 'value'},
            original_exception=ValueError("inner")
        )
        error_dict = error.to_dict()

        assert error_dict['message'] == "Test error"
        assert error_dict['error_type'] == ErrorType.LAUNCH_ERROR.value
        assert error_dict['severity'] == ErrorSeverity.MEDIUM.value
        assert error_dict['details'] == {'key': 'value'}
        assert error_dict['original_exception'] == "inner"

    def test_tool_not_found_message(self):
        error = ToolNotFoundError()

        assert error.message == "yt-dlp is not installed or not in PATH. Please install it first."
        assert error.install_url == YTDLP_INSTALL_URL
        assert YTDLP_INSTALL_URL in error.details['suggested_solution']
        assert error.severity == ErrorSeverity.HIGH

    def test_tool_exit_error(self):
        error = ToolExitError(127, executable='/opt/bin/yt-dlp')

        assert error.exit_code == 127
        assert error.message == "/opt/bin/yt-dlp exited with code 127"
        assert error.error_type == ErrorType.TOOL_EXIT_ERROR

    def test_error_types(self):
        assert ValidationError("x").error_type == ErrorType.VALIDATION_ERROR
        assert ValidationError("x").severity == ErrorSeverity.LOW
        assert ConfigurationError("x").error_type == ErrorType.CONFIGURATION_ERROR
        assert FileSystemError("x").error_type == ErrorType.FILESYSTEM_ERROR
        assert LaunchError("x").error_type == ErrorType.LAUNCH_ERROR

    def test_inheritance(self):
        for error in (ValidationError("x"), ToolNotFoundError(), ToolExitError(1), LaunchError("x")):
            assert isinstance(error, DownloaderError)
            assert isinstance(error, Exception)
