"""
File system helpers for preparing download destinations.
"""

import os
from pathlib import Path
from typing import Optional
import logging

from config.error_handling import FileSystemError


class FileSystemValidator:
    """Validates and prepares output directories before yt-dlp writes to them."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def ensure_directory(self, output_path: str) -> bool:
        """
        Create the output directory (and parents) if it does not exist yet.

        Args:
            output_path: Directory that will receive downloaded files

        Returns:
            True if the directory was created, False if it already existed

        Raises:
            FileSystemError: If the path exists but is not a directory or cannot be created
        """
        path = Path(output_path)

        if path.exists():
            if not path.is_dir():
                raise FileSystemError(
                    f"Output path {output_path} exists but is not a directory",
                    details={'path': str(output_path)}
                )
            return False

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileSystemError(
                f"Cannot create directory {output_path}: {str(e)}",
                details={'path': str(output_path)},
                original_exception=e
            )

        self.logger.info(f"Created output directory: {output_path}")
        return True

    def is_writable(self, output_path: str) -> bool:
        """Check whether an existing directory accepts new files."""
        path = Path(output_path)
        return path.is_dir() and os.access(str(path), os.W_OK)
