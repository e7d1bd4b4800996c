"""

FontFragmentResolver - horizontal geometry of styled runs inside one line.

Also hosts the helpers that keep fragments aligned with their text while a
request is tab-expanded and wrapped into several lines.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from ..constants import BOLD, REGULAR
from .glyph_metrics import GlyphMetricsCache
from .line_wrapper import expand_tabs
from .models import DocText, FontFragment
from .text_types import TextType


@dataclass(frozen=True, slots=True)
class UnderlineStroke:
    x1: float
    x2: float
    y: float
    stroke_width: float


@dataclass(frozen=True, slots=True)
class FragmentSpan:
    """A fragment's text with its resolved pixel range on the line."""

    text: str
    style_id: str
    start_x: float
    end_x: float
    underline: Optional[UnderlineStroke] = None

    @property
    def width(self) -> float:
        return self.end_x - self.start_x


def single_fragment(length: int, bold: bool = False, underlined: bool = False) -> Tuple[FontFragment, ...]:
    return (FontFragment(length, BOLD if bold else REGULAR, underlined),)


def slice_fragments(fragments: Sequence[FontFragment], start: int, end: int) -> Tuple[FontFragment, ...]:
    """

    Cuts the fragments down to the character window ``[start, end)``.

    Args:
    fragments: Fragments covering the whole source text
    start: First character of the window
    end: End of the window (exclusive)

    Returns:
    Fragments whose lengths sum to ``end - start``; empty runs are dropped

    """
    sliced: List[FontFragment] = []
    position = 0
    for fragment in fragments:
        frag_start = position
        frag_end = position + fragment.char_count
        position = frag_end
        overlap = min(frag_end, end) - max(frag_start, start)
        if overlap > 0:
            sliced.append(FontFragment(overlap, fragment.style_id, fragment.underlined))
        if frag_end >= end:
            break
    return tuple(sliced)


def expand_fragment_tabs(text: str, fragments: Iterable[FontFragment]) -> Tuple[str, Tuple[FontFragment, ...]]:
    """Expands tabs in ``text`` and stretches each fragment by the characters its tabs gained."""
    pieces: List[str] = []
    expanded: List[FontFragment] = []
    position = 0
    for fragment in fragments:
        piece = expand_tabs(text[position:position + fragment.char_count])
        position += fragment.char_count
        pieces.append(piece)
        expanded.append(FontFragment(len(piece), fragment.style_id, fragment.underlined))
    return "".join(pieces), tuple(expanded)


class FontFragmentResolver:
    """Resolves pixel ranges and underline strokes of a line's fragments.

    Each fragment is measured with the cache registered for its style id,
    falling back to ``metrics``, so the ranges match the font it is drawn in.
    """

    def __init__(self, metrics: GlyphMetricsCache, style_metrics: Optional[Mapping[str, GlyphMetricsCache]] = None):
        self.metrics = metrics
        self.style_metrics = dict(style_metrics or {})

    def metrics_for(self, style_id: str) -> GlyphMetricsCache:
        return self.style_metrics.get(style_id, self.metrics)

    @staticmethod
    def stroke_width(text_type: TextType) -> float:
        # underline thickness scales with the font, 1.0 at heading size
        return text_type.font_size / TextType.HEADING.font_size

    def resolve(self, doc_text: DocText, cursor_y: float) -> List[FragmentSpan]:
        if doc_text.is_sentinel:
            return []

        text = doc_text.text or ""
        text_type = doc_text.text_type
        line_width = self.stroke_width(text_type)
        underline_y = cursor_y - 2 * line_width

        spans: List[FragmentSpan] = []
        position = 0
        start_x = doc_text.x_start
        for fragment in doc_text.fragments or ():
            chunk = text[position:position + fragment.char_count]
            position += fragment.char_count
            end_x = start_x + self.metrics_for(fragment.style_id).text_width(chunk, text_type)
            underline = None
            if fragment.underlined:
                underline = UnderlineStroke(start_x, end_x, underline_y, line_width)
            spans.append(FragmentSpan(chunk, fragment.style_id, start_x, end_x, underline))
            start_x = end_x
        return spans
