"""Unit tests for size string parsing and formatting."""

import pytest

from filefinder.exceptions import SizeParseError
from filefinder.utils import format_size, parse_size


@pytest.mark.unit
class TestParseSize:
    """Tests for parse_size()."""

    @pytest.mark.parametrize("text, expected", [
        ("2 MB", 2097152),
        ("2MB", 2097152),
        ("2 mb", 2097152),
        ("1 KB", 1024),
        ("1k", 1024),
        ("1.5 GB", int(1.5 * 1024 ** 3)),
        ("1 TB", 1024 ** 4),
        ("512", 512),
        ("512 B", 512),
        ("  10 KB  ", 10240),
        (".5 KB", 512),
    ])
    def test_valid_sizes(self, text, expected):
        assert parse_size(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_means_no_filter(self, text):
        assert parse_size(text) is None

    @pytest.mark.parametrize("text", ["abc", "MB", "1 PB", "-1 MB", "1,5 MB", "10 MBs"])
    def test_invalid_sizes_raise(self, text):
        with pytest.raises(SizeParseError, match="invalid size format"):
            parse_size(text)

    def test_size_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_size("huge")


@pytest.mark.unit
class TestFormatSize:
    """Tests for format_size()."""

    @pytest.mark.parametrize("size, expected", [
        (0, "0 B"),
        (512, "512 B"),
        (1536, "1.5 KB"),
        (2097152, "2.0 MB"),
        (1024 ** 3, "1.0 GB"),
        (3 * 1024 ** 4, "3.0 TB"),
    ])
    def test_format(self, size, expected):
        assert format_size(size) == expected
