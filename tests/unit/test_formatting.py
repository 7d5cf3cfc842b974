"""Tests for padding and sanitizing."""

import pytest

from tvrenamer.template import pad, sanitize


class TestPad:
    """Tests for pad function."""

    def test_pads_to_width(self):
        """Pads short numbers."""
        assert pad(5, '0', 2) == "05"

    def test_no_truncation(self):
        """Wide numbers are rendered in full."""
        assert pad(123, '0', 2) == "123"

    def test_zero_width(self):
        """Width 0 renders the natural digits."""
        assert pad(7, '0', 0) == "7"
        assert pad(0, '0', 0) == "0"

    def test_custom_pad_char(self):
        """Uses the given padding character."""
        assert pad(5, ' ', 3) == "  5"

    def test_negative_rejected(self):
        """Negative numbers raise ValueError."""
        with pytest.raises(ValueError):
            pad(-1, '0', 2)


class TestSanitize:
    """Tests for sanitize function."""

    def test_trims_and_replaces_separator(self):
        """Trims whitespace then replaces slashes."""
        assert sanitize("  Foo/Bar  ") == "Foo-Bar"

    def test_replaces_every_separator(self):
        """All slashes are replaced."""
        assert sanitize("a/b/c") == "a-b-c"

    def test_trim_happens_first(self):
        """Spaces around a lone slash are trimmed before replacement."""
        assert sanitize(" / ") == "-"

    def test_keeps_other_characters(self):
        """Other reserved characters are kept."""
        assert sanitize('What? "Yes": <no>') == 'What? "Yes": <no>'
