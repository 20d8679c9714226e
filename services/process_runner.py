"""
Subprocess supervision for the external yt-dlp executable.
"""

import shutil
import subprocess
import logging
from typing import List, Optional

from config.error_handling import ErrorHandler
from services.interfaces import ProcessRunnerInterface


logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunnerInterface):
    """
    Runs yt-dlp as a child process.

    The child inherits this process's stdout and stderr, so its output reaches
    the terminal live and unmodified. There is no timeout: a hung child blocks
    until it exits.
    """

    def __init__(self, executable: str = "yt-dlp", error_handler: Optional[ErrorHandler] = None):
        self.executable = executable
        self.error_handler = error_handler or ErrorHandler(logger)

    def build_command(self, args: List[str]) -> List[str]:
        return [self.executable] + list(args)

    def run(self, args: List[str]) -> int:
        """
        Spawn the tool and wait for it to exit.

        Args:
            args: Argument vector, without the executable

        Returns:
            The child's exit code

        Raises:
            ToolNotFoundError: If the executable is not on PATH
            LaunchError: If the child could not be started for another reason
        """
        command = self.build_command(args)
        logger.debug(f"Launching: {command}")

        try:
            process = subprocess.Popen(command)
        except OSError as e:
            raise self.error_handler.classify_launch_error(e, self.executable)

        returncode = process.wait()
        logger.debug(f"{self.executable} exited with code {returncode}")
        return returncode

    def is_available(self) -> bool:
        """Check if the executable can be found on PATH."""
        return shutil.which(self.executable) is not None
