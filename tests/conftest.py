"""
Pytest configuration for easydoc
"""

import io
import logging
import sys

import pytest
from reportlab.pdfgen import canvas

from easydoc.engine.fragments import single_fragment
from easydoc.engine.glyph_metrics import GlyphMetricsCache
from easydoc.engine.models import DocText
from easydoc.engine.text_types import TextType


class FixedWidthProvider:
    """Metrics provider where every character is ``width`` em wide."""

    def __init__(self, width=0.5, overrides=None):
        self.width = width
        self.overrides = dict(overrides or {})
        self.calls = []

    def char_width(self, char):
        self.calls.append(char)
        return self.overrides.get(char, self.width)


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def provider_factory():
    return FixedWidthProvider


@pytest.fixture
def fixed_provider():
    """Half an em per character: 6pt for paragraph text."""
    return FixedWidthProvider(0.5)


@pytest.fixture
def fixed_metrics(fixed_provider):
    return GlyphMetricsCache(fixed_provider)


@pytest.fixture
def make_line():
    """Factory for plain single-fragment lines."""
    def _make(text, text_type=TextType.PARAGRAPH, x_start=0.0, bold=False, underlined=False):
        return DocText(text, x_start, text_type, single_fragment(len(text), bold, underlined))
    return _make


@pytest.fixture
def external_pdf():
    """Factory for small PDFs standing in for externally rendered pages."""
    def _make(page_count=1, label="external"):
        buffer = io.BytesIO()
        c = canvas.Canvas(buffer)
        for number in range(1, page_count + 1):
            c.setFont("Helvetica", 12)
            c.drawString(72, 720, f"{label} page {number}")
            c.showPage()
        c.save()
        return buffer.getvalue()
    return _make
