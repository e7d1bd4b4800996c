"""

GlyphMetricsCache - memoized character widths.

Widths are kept normalized (font size 1) so one entry per character serves
every text style; the style's font size is applied on lookup.

"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Dict, Mapping

from reportlab.pdfbase import pdfmetrics  # type: ignore

from ..exceptions import FontError, LayoutError
from ..interfaces import FontMetricsProvider
from .text_types import TextType
from .utils.font_registry import ensure_font

logger = logging.getLogger(__name__)


class ReportLabMetricsProvider:
    """FontMetricsProvider backed by ReportLab font metrics."""

    def __init__(self, font_name: str = "Helvetica"):
        self.font_name = ensure_font(font_name)

    def char_width(self, char: str) -> float:
        try:
            return pdfmetrics.stringWidth(char, self.font_name, 1.0)
        except KeyError as exc:
            raise FontError(f"Font {self.font_name} is no longer available") from exc

    def __repr__(self) -> str:
        return f"ReportLabMetricsProvider({self.font_name!r})"


class GlyphMetricsCache:
    """

    Read-through cache of normalized character widths.

    Safe to share between threads without a lock: a width is computed in
    full before it is stored with a single dict assignment, so readers see
    either no entry or a complete one. Two threads missing on the same
    character both ask the provider and the later store wins with the same
    value.

    """

    def __init__(self, provider: FontMetricsProvider):
        self.provider = provider
        self._widths: Dict[str, float] = {}

    def base_width(self, char: str) -> float:
        width = self._widths.get(char)
        if width is not None:
            return width
        try:
            width = float(self.provider.char_width(char))
        except (OSError, FontError) as exc:
            raise LayoutError(f"Could not compute width of {char!r}", str(exc)) from exc
        self._widths[char] = width
        return width

    def width_of(self, char: str, text_type: TextType) -> float:
        return self.base_width(char) * text_type.font_size

    def text_width(self, text: str, text_type: TextType) -> float:
        return sum(self.width_of(char, text_type) for char in text)

    def __len__(self) -> int:
        return len(self._widths)

    def clear(self) -> None:
        self._widths.clear()


@lru_cache(maxsize=None)
def shared_metrics_cache(font_name: str = "Helvetica") -> GlyphMetricsCache:
    """Process-wide cache for ``font_name``; documents built in parallel threads share it."""
    logger.debug(f"Creating shared glyph metrics cache for {font_name}")
    return GlyphMetricsCache(ReportLabMetricsProvider(font_name))


def metrics_by_style(fonts: Mapping[str, str]) -> Dict[str, GlyphMetricsCache]:
    """Shared caches keyed by fragment style id, for a style id -> font name mapping."""
    return {style_id: shared_metrics_cache(font_name) for style_id, font_name in fonts.items()}
