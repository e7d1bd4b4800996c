"""
Collaborator interfaces consumed by the layout core.

The core only depends on these protocols; ``easydoc.renderers`` ships the
ReportLab/pypdf implementations used by default.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from .metadata import DocumentInfo


class FontMetricsProvider(Protocol):
    """Supplies normalized (em-relative) character widths."""

    def char_width(self, char: str) -> float:
        """Width of ``char`` at font size 1. May raise OSError or FontError."""
        ...


class PageRenderer(Protocol):
    """Draws one page at a time and returns it as opaque bytes."""

    def begin_page(self, width: float, height: float) -> None:
        ...

    def draw_text_line(self, text: str, x: float, y: float, font_name: str, font_size: float) -> None:
        ...

    def draw_underline(self, x1: float, x2: float, y: float, stroke_width: float) -> None:
        ...

    def end_page(self) -> bytes:
        ...


class DocumentSerializer(Protocol):
    """Concatenates page blocks into the final document."""

    def assemble(self, pages: Sequence[bytes], info: Optional["DocumentInfo"] = None) -> Optional[bytes]:
        """Returns None when ``pages`` is empty."""
        ...
