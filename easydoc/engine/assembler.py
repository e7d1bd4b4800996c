"""

DocumentAssembler - turns the page flow into the final document bytes.

Laid-out pages are drawn through a PageRenderer, spliced blocks are passed
through untouched, and the ordered result is handed to a DocumentSerializer.

"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..constants import REGULAR
from ..exceptions import StateError
from ..interfaces import DocumentSerializer, PageRenderer
from ..metadata import DocumentInfo
from .page_flow import PageFlowEngine
from .unified_layout import LayoutPage, SplicedBlock

logger = logging.getLogger(__name__)


class DocumentAssembler:
    """Drives PageFlowEngine to exhaustion and serializes what it produced."""

    def __init__(
        self,
        flow_engine: PageFlowEngine,
        renderer: PageRenderer,
        serializer: DocumentSerializer,
        fonts: Dict[str, str],
    ):
        """

        Args:
        flow_engine: Page flow over the document's queues
        renderer: Draws one laid-out page into page bytes
        serializer: Joins page bytes into the final document
        fonts: Maps fragment style ids to font names known to the renderer

        """
        self.flow_engine = flow_engine
        self.renderer = renderer
        self.serializer = serializer
        self.fonts = fonts
        self._info: Optional[DocumentInfo] = None

    @property
    def info(self) -> Optional[DocumentInfo]:
        return self._info

    def set_info(self, info: DocumentInfo) -> None:
        """Sets document metadata. Metadata can be configured once."""
        if self._info is not None:
            raise StateError(f"{DocumentInfo.__name__} can be configured once!")
        self._info = info

    def assemble_blocks(self) -> List[bytes]:
        """Rendered pages and spliced blocks, in the order their content was queued."""
        blocks: List[bytes] = []
        rendered = 0
        spliced = 0
        for item in self.flow_engine.flow():
            if isinstance(item, SplicedBlock):
                blocks.append(item.data)
                spliced += 1
            else:
                blocks.append(self.render_page(item))
                rendered += 1
        logger.info(f"Page flow finished: {rendered} laid-out page(s), {spliced} spliced block(s)")
        return blocks

    def build(self) -> Optional[bytes]:
        """Returns the serialized document, or None when no page was produced."""
        blocks = self.assemble_blocks()
        if not blocks:
            logger.info("No content produced, nothing to serialize")
            return None
        return self.serializer.assemble(blocks, self._info)

    def render_page(self, page: LayoutPage) -> bytes:
        self.renderer.begin_page(page.size.width, page.size.height)
        for line in page.all_lines():
            for span in line.spans:
                if span.text:
                    font_name = self.fonts.get(span.style_id, self.fonts[REGULAR])
                    self.renderer.draw_text_line(span.text, span.start_x, line.y, font_name, line.font_size)
                if span.underline is not None:
                    stroke = span.underline
                    self.renderer.draw_underline(stroke.x1, stroke.x2, stroke.y, stroke.stroke_width)
        return self.renderer.end_page()
