"""
Unit tests for CLI interfaces and argument validation.
"""

import pytest
from cli.interfaces import ArgumentValidator
from models.core import MediaFormat


class TestArgumentValidator:
    """Test cases for ArgumentValidator class."""

    def test_validate_url_valid_youtube_urls(self):
        """Test validation of valid YouTube URLs."""
        valid_urls = [
            'https://www.youtube.com/watch?v=dQw4w9WgXcQ',
            'https://youtube.com/watch?v=dQw4w9WgXcQ',
            'https://youtu.be/dQw4w9WgXcQ',
            'http://www.youtube.com/watch?v=dQw4w9WgXcQ',
            'www.youtube.com/watch?v=dQw4w9WgXcQ',
            'youtube.com/watch?v=dQw4w9WgXcQ',
            'youtu.be/dQw4w9WgXcQ',
            'https://www.youtube.com/playlist?list=PLrAXtmRdnEQy6nuLMHjMZOz59Oq3KuQEl'
        ]

        for url in valid_urls:
            assert ArgumentValidator.validate_url(url), f"URL should be valid: {url}"

    def test_validate_url_invalid_urls(self):
        """Test validation of invalid URLs."""
        invalid_urls = [
            'https://www.google.com',
            'https://vimeo.com/123456',
            'not_a_url',
            '',
            None,
            123,
            'https://www.youtube.com/',
            'https://youtu.be',
            'https://m.youtube.com/watch?v=dQw4w9WgXcQ',
            'ftp://youtube.com/watch?v=abc',
            'https://notyoutube.com/watch?v=abc',
            'https://www.dailymotion.com/video/x123456'
        ]

        for url in invalid_urls:
            assert not ArgumentValidator.validate_url(url), f"URL should be invalid: {url}"

    def test_validate_url_accepts_any_path(self):
        """The check is syntactic only; any non-empty path after the host passes."""
        assert ArgumentValidator.validate_url('https://youtube.com/not-a-video')

    def test_validate_output_path(self):
        """Test validation of destination paths."""
        for path in ['./downloads', '/home/user/videos', 'C:\\Users\\User\\Downloads', 'out']:
            assert ArgumentValidator.validate_output_path(path), f"Path should be valid: {path}"

        for path in ['', '   ', None, 123]:
            assert not ArgumentValidator.validate_output_path(path), f"Path should be invalid: {path}"

    def test_parse_format_choice_by_number(self):
        """Menu numbers map to formats in menu order."""
        assert ArgumentValidator.parse_format_choice('1') == MediaFormat.AUDIO
        assert ArgumentValidator.parse_format_choice('2') == MediaFormat.VIDEO
        assert ArgumentValidator.parse_format_choice('3') == MediaFormat.BOTH

    def test_parse_format_choice_by_name(self):
        """Format names are accepted as well."""
        assert ArgumentValidator.parse_format_choice('video') == MediaFormat.VIDEO
        assert ArgumentValidator.parse_format_choice('Both') == MediaFormat.BOTH

    def test_parse_format_choice_invalid(self):
        """Out-of-range numbers and free text are rejected."""
        for choice in ['0', '4', 'mp3', '', 'anything']:
            with pytest.raises(ValueError):
                ArgumentValidator.parse_format_choice(choice)
