"""Tests for DocumentAssembler."""

from unittest.mock import Mock, call

import pytest

from easydoc.constants import BOLD, REGULAR
from easydoc.engine.assembler import DocumentAssembler
from easydoc.engine.content_queue import ContentQueue, PageInsertQueue
from easydoc.engine.fragments import FontFragmentResolver
from easydoc.engine.geometry import Margins, Size
from easydoc.engine.header_footer import HeaderFooterRenderer
from easydoc.engine.models import INSERT_PAGE_MARKER, PAGE_BREAK_MARKER, DocText, FontFragment
from easydoc.engine.page_flow import PageFlowEngine
from easydoc.engine.text_types import TextType
from easydoc.exceptions import RenderingError, StateError
from easydoc.metadata import DocumentInfo

PAGE_SIZE = Size(200.0, 100.0)
MARGINS = Margins(bottom=10.0)
FONTS = {REGULAR: "Helvetica", BOLD: "Helvetica-Bold"}


@pytest.fixture
def renderer():
    renderer = Mock()
    renderer.end_page.side_effect = lambda: f"page-{renderer.end_page.call_count}".encode()
    return renderer


@pytest.fixture
def serializer():
    serializer = Mock()
    serializer.assemble.return_value = b"%PDF-document"
    return serializer


@pytest.fixture
def assembler(fixed_metrics, renderer, serializer):
    resolver = FontFragmentResolver(fixed_metrics)
    flow = PageFlowEngine(
        ContentQueue(),
        PageInsertQueue(),
        resolver,
        HeaderFooterRenderer(resolver, PAGE_SIZE, MARGINS),
        PAGE_SIZE,
        MARGINS,
    )
    return DocumentAssembler(flow, renderer, serializer, FONTS)


class TestDocumentAssembler:
    """Test suite for turning the page flow into document bytes."""

    def test_empty_document(self, assembler, serializer):
        """Test nothing is serialized when no page was produced."""
        assert assembler.build() is None
        serializer.assemble.assert_not_called()

    def test_blocks_keep_queue_order(self, assembler, renderer, serializer, make_line):
        """Test rendered pages and spliced blocks are serialized in queue order."""
        flow = assembler.flow_engine
        flow.content.append(make_line("a"))
        flow.inserts.append(b"inserted")
        flow.content.append(INSERT_PAGE_MARKER)
        flow.content.append(make_line("b"))

        result = assembler.build()

        assert result == b"%PDF-document"
        serializer.assemble.assert_called_once_with([b"page-1", b"inserted", b"page-2"], None)
        assert renderer.begin_page.call_args_list == [call(200.0, 100.0), call(200.0, 100.0)]

    def test_fragments_drawn_with_their_fonts(self, assembler, renderer):
        """Test each fragment is drawn in its style's font at its resolved x."""
        fragments = (FontFragment(5, BOLD, True), FontFragment(7, REGULAR, False))
        assembler.flow_engine.content.append(DocText("Title: value", 10.0, TextType.PARAGRAPH, fragments))

        assembler.build()

        renderer.draw_text_line.assert_has_calls([
            call("Title", 10.0, 100.0, "Helvetica-Bold", 12),
            call(": value", 40.0, 100.0, "Helvetica", 12),
        ])
        renderer.draw_underline.assert_called_once_with(10.0, 40.0, 98.5, 0.75)

    def test_each_page_rendered_once(self, assembler, renderer, make_line):
        """Test every laid-out page is opened and closed exactly once."""
        flow = assembler.flow_engine
        flow.content.append(make_line("a"))
        flow.content.append(PAGE_BREAK_MARKER)
        flow.content.append(make_line("b"))

        blocks = assembler.assemble_blocks()

        assert blocks == [b"page-1", b"page-2"]
        assert renderer.begin_page.call_count == renderer.end_page.call_count == 2

    def test_info_passed_to_serializer(self, assembler, serializer, make_line):
        """Test document information reaches the serializer."""
        info = DocumentInfo(title="Report")
        assembler.set_info(info)
        assembler.flow_engine.content.append(make_line("a"))

        assembler.build()

        assert serializer.assemble.call_args.args[1] is info

    def test_info_is_write_once(self, assembler):
        """Test a second set_info fails and keeps the first value."""
        first = DocumentInfo(title="first")
        assembler.set_info(first)

        with pytest.raises(StateError) as exc_info:
            assembler.set_info(DocumentInfo(title="second"))

        assert "can be configured once" in str(exc_info.value)
        assert assembler.info is first

    def test_render_failure_propagates(self, assembler, renderer, serializer, make_line):
        """Test renderer failures reach the caller unchanged."""
        failure = RenderingError("disk full")
        renderer.end_page.side_effect = failure
        assembler.flow_engine.content.append(make_line("a"))

        with pytest.raises(RenderingError) as exc_info:
            assembler.build()

        assert exc_info.value is failure
        serializer.assemble.assert_not_called()
