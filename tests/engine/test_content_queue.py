"""Tests for the content and page insert queues."""

import pytest

from easydoc.engine.content_queue import ContentQueue, PageInsertQueue
from easydoc.engine.models import NEWLINE_MARKER, PAGE_BREAK_MARKER, DocText, FontFragment
from easydoc.engine.text_types import TextType


class TestContentQueue:
    """Test suite for ContentQueue."""

    def test_poll_empty_returns_none(self):
        """Test polling an empty queue does not raise."""
        queue = ContentQueue()

        assert queue.poll() is None
        assert not queue

    def test_fifo_order(self, make_line):
        """Test items come out in the order they were added."""
        queue = ContentQueue()
        first = make_line("first")
        queue.append(first)
        queue.append(NEWLINE_MARKER)
        queue.append(PAGE_BREAK_MARKER)

        assert len(queue) == 3
        assert queue.poll() is first
        assert queue.poll() is NEWLINE_MARKER
        assert queue.poll() is PAGE_BREAK_MARKER
        assert queue.poll() is None


class TestPageInsertQueue:
    """Test suite for PageInsertQueue."""

    def test_fifo_order(self):
        """Test blocks are returned in insertion order."""
        queue = PageInsertQueue()
        queue.append(b"one")
        queue.append(bytearray(b"two"))

        assert len(queue) == 2
        assert queue.poll() == b"one"
        assert queue.poll() == b"two"
        assert queue.poll() is None
        assert not queue


class TestDocText:
    """Test suite for queued line records."""

    def test_fragments_must_cover_text(self):
        """Test fragment counts have to add up to the text length."""
        with pytest.raises(ValueError):
            DocText("abc", 0.0, TextType.PARAGRAPH, (FontFragment(2, "regular"),))

    def test_text_line_needs_fragments(self):
        """Test non-marker lines require text and fragments."""
        with pytest.raises(ValueError):
            DocText("abc", 0.0, TextType.PARAGRAPH)

    def test_negative_fragment(self):
        """Test negative character counts are rejected."""
        with pytest.raises(ValueError):
            FontFragment(-1, "regular")

    def test_sentinels(self):
        """Test markers carry neither text nor fragments."""
        assert NEWLINE_MARKER.is_sentinel
        assert NEWLINE_MARKER.text is None
        assert NEWLINE_MARKER.fragments is None
        with pytest.raises(ValueError):
            DocText.sentinel(TextType.PARAGRAPH)

    def test_immutable(self, make_line):
        """Test queued lines cannot be changed."""
        line = make_line("abc")

        with pytest.raises(AttributeError):
            line.text = "xyz"
