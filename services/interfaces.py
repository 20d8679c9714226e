"""
Interface definitions for all major service components.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Dict, Any, Union
from models.core import DownloadConfig, DownloadRequest, DownloadResult, Invocation


class ProcessRunnerInterface(ABC):
    """Interface for launching the external download tool."""

    @abstractmethod
    def run(self, args: List[str]) -> int:
        """Run the tool with the given arguments and return its exit code."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the tool can be found on PATH."""
        pass


class DownloadManagerInterface(ABC):
    """Interface for download management operations."""

    @abstractmethod
    def plan(self, request: DownloadRequest) -> List[Invocation]:
        """Return the invocations a request would run, in order."""
        pass

    @abstractmethod
    def download(self, request: DownloadRequest) -> DownloadResult:
        """Run every invocation of a request."""
        pass


class ConfigManagerInterface(ABC):
    """Interface for configuration management operations."""

    @abstractmethod
    def load_config(self, config_path: Union[str, Path]) -> DownloadConfig:
        """Load configuration from file."""
        pass

    @abstractmethod
    def save_default_config(self, output_path: Union[str, Path]) -> None:
        """Generate and save default configuration file."""
        pass

    @abstractmethod
    def merge_cli_args(self, config: DownloadConfig, cli_args: Dict[str, Any]) -> DownloadConfig:
        """Merge CLI arguments with configuration."""
        pass
