"""
ReportLab page renderer.

Every page is drawn on its own canvas and returned as a single-page PDF,
so laid-out pages and spliced blocks can be concatenated in any order.
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from reportlab.pdfgen import canvas

from ..exceptions import RenderingError

logger = logging.getLogger(__name__)


class ReportLabPageRenderer:
    """PageRenderer drawing text and underlines with a ReportLab canvas."""

    def __init__(self) -> None:
        self._canvas: Optional[canvas.Canvas] = None
        self._buffer: Optional[io.BytesIO] = None
        self.pages_rendered = 0

    def begin_page(self, width: float, height: float) -> None:
        if self._canvas is not None:
            raise RenderingError("begin_page called twice", "end the current page first")
        self._buffer = io.BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height))

    def draw_text_line(self, text: str, x: float, y: float, font_name: str, font_size: float) -> None:
        c = self._require_canvas()
        c.setFont(font_name, font_size)
        c.drawString(x, y, text)

    def draw_underline(self, x1: float, x2: float, y: float, stroke_width: float) -> None:
        c = self._require_canvas()
        c.setLineWidth(stroke_width)
        c.line(x1, y, x2, y)

    def end_page(self) -> bytes:
        c = self._require_canvas()
        c.showPage()
        c.save()
        data = self._buffer.getvalue()
        self._canvas = None
        self._buffer = None
        self.pages_rendered += 1
        logger.debug(f"Rendered page {self.pages_rendered} ({len(data)} bytes)")
        return data

    def _require_canvas(self) -> canvas.Canvas:
        if self._canvas is None:
            raise RenderingError("No page in progress", "call begin_page first")
        return self._canvas
