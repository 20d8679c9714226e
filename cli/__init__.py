"""
Command-line interface components for the YouTube Media Downloader application.
"""

from .interfaces import PromptInterface, ArgumentValidator
from .main_cli import InteractivePrompter

__all__ = ['PromptInterface', 'ArgumentValidator', 'InteractivePrompter']
