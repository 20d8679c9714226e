"""
Logging configuration for the YouTube Media Downloader application.
"""

import logging
import logging.handlers
import os
import json
import time
from pathlib import Path
from typing import Optional, Dict, Any, List
from datetime import datetime


_RESERVED_RECORD_KEYS = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message'
])

# Set on records whose message the caller displays itself
REPORTED_RECORD_ATTR = 'reported_to_user'


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "./logs",
    console_level: str = "WARNING",
    max_file_size: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    enable_structured_logging: bool = True,
    enable_audit_logging: bool = True
) -> None:
    """
    Set up logging configuration for the application.

    The console handler writes to stderr and defaults to WARNING so that
    log lines do not interleave with the relayed yt-dlp output.

    Args:
        log_level: Logging level for the log file (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name. If None, uses 'youtube_media_downloader.log'
        log_dir: Directory to store log files
        console_level: Logging level for the console handler
        max_file_size: Maximum size of log file before rotation
        backup_count: Number of backup log files to keep
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    if log_file is None:
        log_file = "youtube_media_downloader.log"

    log_file_path = log_path / log_file

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers
    logger.handlers.clear()

    console_formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    if enable_structured_logging:
        formatter = StructuredFormatter()
    else:
        formatter = console_formatter

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.WARNING))
    console_handler.setFormatter(console_formatter)
    console_handler.addFilter(ReportedErrorFilter())
    logger.addHandler(console_handler)

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_file_path,
        maxBytes=max_file_size,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if enable_audit_logging:
        setup_audit_logging(log_dir, max_file_size, backup_count)


class ReportedErrorFilter(logging.Filter):
    """Drops records for errors the CLI has already shown to the user."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, REPORTED_RECORD_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        extra_fields = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }
        if extra_fields:
            log_entry['extra'] = extra_fields

        return json.dumps(log_entry, default=str)


class AuditLogger:
    """Audit trail of download requests and every yt-dlp invocation."""

    def __init__(self, log_dir: str, max_file_size: int = 10 * 1024 * 1024, backup_count: int = 10):
        self.logger = logging.getLogger('audit')
        self.logger.setLevel(logging.INFO)

        audit_dir = Path(log_dir) / 'audit'
        audit_dir.mkdir(parents=True, exist_ok=True)
        self.audit_file = audit_dir / 'audit.log'

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        handler = logging.handlers.RotatingFileHandler(
            filename=self.audit_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding='utf-8'
        )
        handler.setFormatter(StructuredFormatter())
        self.logger.addHandler(handler)

        # Prevent audit logs from propagating to root logger
        self.logger.propagate = False

    def log_download_start(self, url: str, media_format: str, destination: str) -> None:
        """Log the start of a download request."""
        self.logger.info(
            "Download started",
            extra={
                'event_type': 'download_start',
                'url': url,
                'media_format': media_format,
                'destination': destination,
                'session_id': self._get_session_id()
            }
        )

    def log_invocation(self, args: List[str], output_directory: str,
                       returncode: Optional[int], duration: float) -> None:
        """Log one completed yt-dlp invocation."""
        self.logger.info(
            "Invocation finished",
            extra={
                'event_type': 'invocation',
                'tool_args': args,
                'output_directory': output_directory,
                'returncode': returncode,
                'duration_seconds': duration,
                'session_id': self._get_session_id()
            }
        )

    def log_download_complete(self, url: str, success: bool, invocation_count: int,
                              error: Optional[str] = None, duration: Optional[float] = None) -> None:
        """Log the completion of a download request."""
        self.logger.info(
            "Download completed",
            extra={
                'event_type': 'download_complete',
                'url': url,
                'success': success,
                'invocation_count': invocation_count,
                'error': error,
                'duration_seconds': duration,
                'session_id': self._get_session_id()
            }
        )

    def log_error_event(self, error_type: str, error_message: str, context: Dict[str, Any],
                        severity: str = 'medium') -> None:
        """Log error events for analysis."""
        self.logger.error(
            "Error event",
            extra={
                'event_type': 'error',
                'error_type': error_type,
                'error_message': error_message,
                'context': context,
                'severity': severity,
                'session_id': self._get_session_id()
            }
        )

    def _get_session_id(self) -> str:
        """Get or create a session ID for tracking related operations."""
        if not hasattr(self, '_session_id'):
            self._session_id = f"session_{int(time.time())}_{os.getpid()}"
        return self._session_id


_audit_logger: Optional[AuditLogger] = None


def setup_audit_logging(log_dir: str, max_file_size: int, backup_count: int) -> AuditLogger:
    """Set up audit logging and return the audit logger instance."""
    global _audit_logger
    _audit_logger = AuditLogger(log_dir, max_file_size, backup_count)
    return _audit_logger


def get_audit_logger() -> Optional[AuditLogger]:
    """Get the audit logger configured by setup_logging, if any."""
    return _audit_logger
