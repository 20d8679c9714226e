"""
Download manager that drives yt-dlp through one or two invocations per request.
"""

import os
import time
import logging
from typing import List, Optional

from models.core import (
    DownloadConfig, DownloadRequest, DownloadResult, DownloadStatus,
    Invocation, MediaFormat
)
from config.error_handling import DownloaderError, ToolExitError
from config.filesystem_validator import FileSystemValidator
from config.logging_config import AuditLogger, get_audit_logger
from services.command_builder import CommandBuilder
from services.interfaces import DownloadManagerInterface, ProcessRunnerInterface
from services.process_runner import SubprocessRunner


class DownloadManager(DownloadManagerInterface):
    """
    Turns a DownloadRequest into yt-dlp invocations and runs them one at a time.

    For MediaFormat.BOTH the video invocation runs first; the audio invocation
    into the audio subdirectory only starts after the video one exits with 0.
    Files from an earlier, successful invocation are left in place when a
    later one fails.
    """

    def __init__(
        self,
        config: Optional[DownloadConfig] = None,
        runner: Optional[ProcessRunnerInterface] = None,
        filesystem_validator: Optional[FileSystemValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.config = config or DownloadConfig()
        self.runner = runner or SubprocessRunner(self.config.ytdlp_path)
        self.filesystem_validator = filesystem_validator or FileSystemValidator()
        self.command_builder = CommandBuilder(self.config)
        self.audit_logger = audit_logger or get_audit_logger()
        self.logger = logger or logging.getLogger(__name__)

    def plan(self, request: DownloadRequest) -> List[Invocation]:
        """
        Build the ordered invocations for a request without running them.

        Args:
            request: Validated download request

        Returns:
            Invocations in execution order
        """
        url = request.url
        destination = request.destination

        if request.media_format == MediaFormat.AUDIO:
            return [Invocation(
                args=self.command_builder.audio_args(url, destination),
                output_directory=destination,
                label='audio'
            )]

        if request.media_format == MediaFormat.VIDEO:
            return [Invocation(
                args=self.command_builder.video_args(url, destination),
                output_directory=destination,
                label='video'
            )]

        audio_destination = os.path.join(destination, self.config.audio_subdirectory)
        return [
            Invocation(
                args=self.command_builder.video_args(
                    url, destination, write_auto_subs=self.config.write_auto_subs
                ),
                output_directory=destination,
                label='video'
            ),
            Invocation(
                args=self.command_builder.audio_args(url, audio_destination),
                output_directory=audio_destination,
                label='audio'
            )
        ]

    def download(self, request: DownloadRequest) -> DownloadResult:
        """
        Run every invocation of a request, strictly sequentially.

        Args:
            request: Validated download request

        Returns:
            Successful DownloadResult listing the invocations that ran

        Raises:
            ToolExitError: If an invocation exits with a nonzero code
            ToolNotFoundError: If yt-dlp is not on PATH
            LaunchError: If yt-dlp could not be started
            FileSystemError: If an output directory cannot be created
        """
        result = DownloadResult(request=request, status=DownloadStatus.IN_PROGRESS)
        start_time = time.time()

        self._audit(
            'log_download_start',
            request.url, request.media_format.value, request.destination
        )

        try:
            for invocation in self.plan(request):
                result.add_invocation(invocation)
                self._run_invocation(invocation)
        except DownloaderError as e:
            result.mark_failure(e.message)
            self._audit(
                'log_error_event',
                type(e).__name__, e.message,
                {'url': request.url, 'details': e.details},
                severity=e.severity.value
            )
            self._audit_complete(result, time.time() - start_time)
            raise

        result.mark_success(time.time() - start_time)
        self._audit_complete(result, result.download_time)
        return result

    def _run_invocation(self, invocation: Invocation) -> None:
        if self.filesystem_validator.ensure_directory(invocation.output_directory):
            self.logger.debug(f"Created {invocation.output_directory} for {invocation.label} download")

        self.logger.info(f"Starting {invocation.label} download into {invocation.output_directory}")
        started = time.time()
        try:
            invocation.returncode = self.runner.run(invocation.args)
        finally:
            invocation.duration = time.time() - started
            self._audit(
                'log_invocation',
                invocation.args, invocation.output_directory,
                invocation.returncode, invocation.duration
            )

        if not invocation.succeeded:
            raise ToolExitError(
                invocation.returncode,
                executable=self.config.ytdlp_path,
                details={'label': invocation.label, 'args': invocation.args}
            )

        self.logger.info(f"Finished {invocation.label} download in {invocation.duration:.1f}s")

    def _audit_complete(self, result: DownloadResult, duration: float) -> None:
        self._audit(
            'log_download_complete',
            result.request.url,
            result.success,
            len(result.invocations),
            error=result.error_message or None,
            duration=duration
        )

    def _audit(self, event: str, *args, **kwargs) -> None:
        """Write an audit event. A failing audit trail never changes a download's outcome."""
        if not self.audit_logger:
            return
        try:
            getattr(self.audit_logger, event)(*args, **kwargs)
        except Exception as e:
            self.logger.warning(f"Could not write audit event {event}: {e}")
