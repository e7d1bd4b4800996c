"""Greedy line wrapping with backtracking to the last word boundary."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Sequence

from ..constants import NEW_LINE, SPACE, TAB, TAB_REPLACEMENT
from .glyph_metrics import GlyphMetricsCache
from .models import FontFragment
from .text_types import TextType

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class WrappedLine:
    """A wrapped line and its ``[start, end)`` offsets in the tab-expanded input."""

    text: str
    start: int
    end: int


def expand_tabs(text: str) -> str:
    return text.replace(TAB, TAB_REPLACEMENT)


def _physical_lines(text: str) -> List[str]:
    lines = text.split(NEW_LINE)
    # trailing newlines do not open empty lines
    while len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


def _char_styles(fragments: Sequence[FontFragment]) -> List[str]:
    styles: List[str] = []
    for fragment in fragments:
        styles.extend([fragment.style_id] * fragment.char_count)
    return styles


def _trimmed(line: str, start: int, end: int, offset: int) -> WrappedLine:
    segment = line[start:end]
    stripped = segment.strip()
    if not stripped:
        position = offset + start
        return WrappedLine(text="", start=position, end=position)
    lead = len(segment) - len(segment.lstrip())
    begin = offset + start + lead
    return WrappedLine(text=stripped, start=begin, end=begin + len(stripped))


class LineWrapper:
    """

    Breaks text into lines that fit between ``x_start`` and the right margin.

    Widths come from GlyphMetricsCache. When fragments are given, every
    character is measured with the cache of its fragment's style so bold runs
    are not under-measured. When a line overflows, the break moves back to
    just after the last space of the overflowing span, ignoring the spaces
    the span starts with; a span without spaces is cut where it overflowed.

    """

    def __init__(self, metrics: GlyphMetricsCache, style_metrics: Optional[Mapping[str, GlyphMetricsCache]] = None):
        self.metrics = metrics
        self.style_metrics = dict(style_metrics or {})

    @staticmethod
    def available_width(x_start: float, page_width: float, margin_right: float) -> float:
        return page_width - x_start - margin_right

    def metrics_for(self, style_id: Optional[str]) -> GlyphMetricsCache:
        return self.style_metrics.get(style_id, self.metrics)

    def wrap(
        self,
        text: str,
        x_start: float,
        text_type: TextType,
        page_width: float,
        margin_right: float,
        fragments: Optional[Sequence[FontFragment]] = None,
    ) -> Iterator[str]:
        """Yields wrapped lines in order. The iterator can be consumed once."""
        for wrapped in self.wrap_spans(text, x_start, text_type, page_width, margin_right, fragments):
            yield wrapped.text

    def wrap_spans(
        self,
        text: str,
        x_start: float,
        text_type: TextType,
        page_width: float,
        margin_right: float,
        fragments: Optional[Sequence[FontFragment]] = None,
    ) -> Iterator[WrappedLine]:
        """

        Yields wrapped lines with their offsets.

        Args:
        text: Text to wrap; tabs are expanded first
        x_start: Left edge of the lines
        text_type: Style category giving the font size
        page_width: Width of the page
        margin_right: Right margin of the page
        fragments: Optional fragments covering the tab-expanded text

        """
        available = self.available_width(x_start, page_width, margin_right)
        styles = _char_styles(fragments) if fragments else None
        offset = 0
        for line in _physical_lines(expand_tabs(text)):
            yield from self._wrap_line(line, offset, available, text_type, styles)
            offset += len(line) + len(NEW_LINE)

    def _width(self, line: str, index: int, offset: int, text_type: TextType, styles: Optional[List[str]]) -> float:
        style_id = None
        if styles is not None and offset + index < len(styles):
            style_id = styles[offset + index]
        return self.metrics_for(style_id).width_of(line[index], text_type)

    def _wrap_line(
        self,
        line: str,
        offset: int,
        available: float,
        text_type: TextType,
        styles: Optional[List[str]] = None,
    ) -> Iterator[WrappedLine]:
        start = 0
        index = 0
        width = 0.0
        emitted = False
        while index < len(line):
            width += self._width(line, index, offset, text_type, styles)
            if width < available:
                index += 1
                continue

            word_start = start
            while word_start < index and line[word_start] == SPACE:
                word_start += 1

            space = line.rfind(SPACE, word_start, index)
            if space != -1:
                brk = space + 1
            elif index > start and word_start == index:
                # only spaces before the overflow: drop them and measure again
                start = index
                width = 0.0
                continue
            elif index > start:
                # single word wider than the line, cut mid-word
                brk = index
            else:
                brk = start + 1
                logger.warning(f"Character {line[start]!r} is wider than the available {available:.1f}pt, placed on its own line")
            logger.debug(f"Wrapping {text_type.value} line at {offset + brk} (overflow at {offset + index})")

            yield _trimmed(line, start, brk, offset)
            emitted = True
            start = brk
            index = brk
            width = 0.0

        # blank remainders after a break are not lines of their own
        if not emitted or line[start:].strip():
            yield _trimmed(line, start, len(line), offset)
