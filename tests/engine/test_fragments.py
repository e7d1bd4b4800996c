"""Tests for fragment geometry and fragment slicing helpers."""

import pytest

from easydoc.constants import BOLD, REGULAR
from easydoc.engine.fragments import (
    FontFragmentResolver,
    expand_fragment_tabs,
    single_fragment,
    slice_fragments,
)
from easydoc.engine.glyph_metrics import GlyphMetricsCache
from easydoc.engine.models import NEWLINE_MARKER, DocText, FontFragment
from easydoc.engine.text_types import TextType


@pytest.fixture
def resolver(fixed_metrics):
    return FontFragmentResolver(fixed_metrics)


class TestFontFragmentResolver:
    """Test suite for resolving fragment pixel ranges."""

    def test_single_fragment(self, resolver):
        """Test one fragment spans the whole line from x_start."""
        doc_text = DocText("abc", 10.0, TextType.PARAGRAPH, single_fragment(3))

        spans = resolver.resolve(doc_text, 500.0)

        assert len(spans) == 1
        assert spans[0].text == "abc"
        assert spans[0].style_id == REGULAR
        assert (spans[0].start_x, spans[0].end_x) == (10.0, 28.0)
        assert spans[0].underline is None

    def test_underline_geometry(self, resolver):
        """Test underline strokes sit two stroke widths below the baseline."""
        doc_text = DocText("abc", 10.0, TextType.PARAGRAPH, single_fragment(3, underlined=True))

        stroke = resolver.resolve(doc_text, 500.0)[0].underline

        assert stroke.stroke_width == 0.75
        assert stroke.y == 498.5
        assert (stroke.x1, stroke.x2) == (10.0, 28.0)

    def test_stroke_width_follows_font_size(self):
        """Test stroke width is 1 at heading size and scales linearly."""
        assert FontFragmentResolver.stroke_width(TextType.HEADING) == 1.0
        assert FontFragmentResolver.stroke_width(TextType.FOOTER) == 0.5

    def test_title_value_fragments(self, resolver):
        """Test fragments are contiguous and only the underlined one gets a stroke."""
        fragments = (FontFragment(5, BOLD, True), FontFragment(7, REGULAR, False))
        doc_text = DocText("Title: value", 50.0, TextType.PARAGRAPH, fragments)

        spans = resolver.resolve(doc_text, 700.0)

        assert [span.text for span in spans] == ["Title", ": value"]
        assert [span.style_id for span in spans] == [BOLD, REGULAR]
        assert (spans[0].start_x, spans[0].end_x) == (50.0, 80.0)
        assert (spans[1].start_x, spans[1].end_x) == (80.0, 122.0)
        assert spans[0].underline is not None
        assert spans[1].underline is None

    def test_fragments_cover_line_width(self, resolver, fixed_metrics):
        """Test fragment widths add up to the width of the whole line."""
        fragments = (FontFragment(2, REGULAR), FontFragment(3, BOLD), FontFragment(4, REGULAR))
        doc_text = DocText("- item one", 20.0, TextType.LIST, fragments + (FontFragment(1, REGULAR),))

        spans = resolver.resolve(doc_text, 100.0)

        assert sum(span.width for span in spans) == fixed_metrics.text_width("- item one", TextType.LIST)
        assert spans[-1].end_x == 20.0 + fixed_metrics.text_width("- item one", TextType.LIST)

    def test_marker_has_no_spans(self, resolver):
        """Test control markers resolve to nothing."""
        assert resolver.resolve(NEWLINE_MARKER, 100.0) == []

    def test_bold_fragment_measured_with_bold_metrics(self, fixed_metrics, provider_factory):
        """Test a bold run ends where the bold font ends and the next run starts there."""
        bold = GlyphMetricsCache(provider_factory(1.0))
        resolver = FontFragmentResolver(fixed_metrics, {BOLD: bold})
        fragments = (FontFragment(5, BOLD, True), FontFragment(7, REGULAR, False))
        doc_text = DocText("Title: value", 50.0, TextType.PARAGRAPH, fragments)

        title, value = resolver.resolve(doc_text, 700.0)

        assert (title.start_x, title.end_x) == (50.0, 110.0)
        assert title.underline.x2 == 110.0
        assert (value.start_x, value.end_x) == (110.0, 152.0)


class TestFragmentHelpers:
    """Test suite for keeping fragments aligned with wrapped text."""

    def test_single_fragment_style(self):
        """Test the bold flag selects the style id."""
        assert single_fragment(4) == (FontFragment(4, REGULAR, False),)
        assert single_fragment(4, bold=True, underlined=True) == (FontFragment(4, BOLD, True),)

    def test_slice_across_boundary(self):
        """Test a window spanning two fragments keeps both styles."""
        fragments = (FontFragment(5, BOLD, True), FontFragment(7, REGULAR))

        assert slice_fragments(fragments, 3, 9) == (
            FontFragment(2, BOLD, True),
            FontFragment(4, REGULAR),
        )

    def test_slice_drops_empty_runs(self):
        """Test fragments outside the window are left out."""
        fragments = (FontFragment(5, BOLD, True), FontFragment(7, REGULAR))

        assert slice_fragments(fragments, 6, 12) == (FontFragment(6, REGULAR),)
        assert slice_fragments(fragments, 4, 4) == ()

    def test_expand_tabs_stretches_fragment(self):
        """Test each tab adds three characters to the fragment that holds it."""
        fragments = (FontFragment(1, BOLD), FontFragment(2, REGULAR))

        text, expanded = expand_fragment_tabs("a\tb", fragments)

        assert text == "a    b"
        assert expanded == (FontFragment(1, BOLD), FontFragment(5, REGULAR))
