"""

PageFlowEngine - vertical cursor driven pagination.

Consumes the content queue line by line, moving a cursor down the page by
each line's leading until the bottom margin is reached or a control marker
closes the page. Inserted page blocks are signalled between pages.

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, Optional

from ..exceptions import LayoutError
from .content_queue import ContentQueue, PageInsertQueue
from .fragments import FontFragmentResolver
from .geometry import Margins, Size
from .header_footer import HeaderFooterRenderer
from .models import DocText
from .text_types import TextType
from .unified_layout import FlowItem, LayoutPage, PlacedLine, SplicedBlock

logger = logging.getLogger(__name__)


class FlowState(str, Enum):
    ACCUMULATING = "accumulating"
    PAGE_CLOSED = "page_closed"
    DONE = "done"


class PageFlowEngine:
    """Builds LayoutPages from the content queue. Not safe for concurrent use."""

    def __init__(
        self,
        content: ContentQueue,
        inserts: PageInsertQueue,
        resolver: FontFragmentResolver,
        header_footer: HeaderFooterRenderer,
        page_size: Size,
        margins: Margins,
    ):
        self.content = content
        self.inserts = inserts
        self.resolver = resolver
        self.header_footer = header_footer
        self.page_size = page_size
        self.margins = margins

        self.cursor: float = self.content_top
        self.pending_insert: Optional[bytes] = None
        self.page_count = 0
        self.state = FlowState.ACCUMULATING

    @property
    def content_top(self) -> float:
        """Starting cursor of every page: the page height minus the top margin."""
        return self.page_size.height - self.margins.top

    def has_work(self) -> bool:
        return bool(self.content) or self.pending_insert is not None

    def create_page(self) -> Optional[LayoutPage]:
        """

        Lays out the next page.

        Returns:
        The page, or None if nothing was placed on it (empty queue, a page
        break on a fresh page, or an insertion requested before any content)

        """
        self.cursor = self.content_top
        self.state = FlowState.ACCUMULATING
        page = LayoutPage(number=self.page_count + 1, size=self.page_size)

        while True:
            doc_text = self.content.poll()
            if doc_text is None:
                self._close()
                return None

            match doc_text.text_type:
                case TextType.PAGE_BREAK:
                    self.cursor = 0.0
                case TextType.NEWLINE:
                    self.cursor -= doc_text.text_type.leading
                case TextType.INSERT_PAGE:
                    if self._take_insert():
                        self._close()
                        return None
                case _:
                    self._place(page, doc_text)

            if not self.content or self.cursor <= self.margins.bottom:
                break

        self._close()
        if page.is_empty:
            logger.debug("Page closed without content, nothing emitted")
            return None

        self.header_footer.apply(page)
        self.page_count += 1
        logger.debug(f"Page {page.number} closed with {len(page.lines)} line(s), cursor={self.cursor:.2f}")
        return page

    def flow(self) -> Iterator[FlowItem]:
        """Yields laid-out pages and spliced blocks in queue order until all work is done."""
        logger.debug(f"Flowing {len(self.content)} queued item(s) and {len(self.inserts)} inserted block(s)")
        while self.has_work():
            if self.pending_insert is not None:
                block, self.pending_insert = self.pending_insert, None
                logger.debug(f"Splicing inserted block of {len(block)} bytes")
                yield SplicedBlock(block)
                continue

            page = self.create_page()
            if page is not None:
                yield page
        self.state = FlowState.DONE

    def _take_insert(self) -> bool:
        """Pairs an INSERT_PAGE marker with its block; True when it can be spliced immediately."""
        block = self.inserts.poll()
        if block is None:
            raise LayoutError("Insert marker without page data", "page insert queue is empty")
        self.pending_insert = block
        if self.cursor == self.content_top:
            # nothing placed yet: splice right away instead of emitting a blank page
            return True
        self.cursor = 0.0
        return False

    def _place(self, page: LayoutPage, doc_text: DocText) -> None:
        spans = self.resolver.resolve(doc_text, self.cursor)
        page.add_line(PlacedLine(doc_text=doc_text, x=doc_text.x_start, y=self.cursor, spans=spans))
        self.cursor -= doc_text.text_type.leading

    def _close(self) -> None:
        self.state = FlowState.DONE if not self.has_work() else FlowState.PAGE_CLOSED
