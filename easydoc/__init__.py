"""
easydoc - easy PDF document creation.

Lays out headings, paragraphs, lists and "title: value" lines into A4
pages with word wrapping, repeating headers and footers, forced page
breaks and verbatim insertion of pre-rendered PDF pages.

Quick Start:
    from easydoc import Document

    doc = Document(50)
    doc.add_heading("Report", bold=True)
    doc.add_paragraph("Lorem ipsum ...")
    doc.save("report.pdf")
"""

from .version import __version__, __version_info__

from .exceptions import (
    EasyDocError,
    FontError,
    LayoutError,
    RenderingError,
    StateError,
)
from .config import DocumentConfig
from .document import Document
from .engine.geometry import Margins, Size
from .engine.text_types import TextType
from .metadata import DocumentInfo, Trapped
from .utils import setup_logging

__all__ = [
    "__version__",
    "__version_info__",
    "Document",
    "DocumentConfig",
    "DocumentInfo",
    "EasyDocError",
    "FontError",
    "LayoutError",
    "Margins",
    "RenderingError",
    "Size",
    "StateError",
    "TextType",
    "Trapped",
    "setup_logging",
]
