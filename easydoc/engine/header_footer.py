"""Static header and footer lines repeated on every laid-out page."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .fragments import FontFragmentResolver, single_fragment
from .geometry import Margins, Size
from .models import DocText
from .text_types import TextType
from .unified_layout import LayoutPage, PlacedLine

logger = logging.getLogger(__name__)


class HeaderFooterRenderer:
    """

    Places header lines top-down from the page's top edge and footer lines
    bottom-up from its bottom edge.

    Header lines are stacked in definition order, each one a leading below
    the previous. Footer lines grow upwards from the bottom edge starting with
    the first defined line, so the first footer line is the lowest one.

    """

    def __init__(
        self,
        resolver: FontFragmentResolver,
        page_size: Size,
        margins: Margins,
        page_number_format: Optional[str] = None,
    ):
        self.resolver = resolver
        self.page_size = page_size
        self.margins = margins
        self.page_number_format = page_number_format
        self.header_lines: List[DocText] = []
        self.footer_lines: List[DocText] = []

    def set_header(self, lines: Iterable[DocText]) -> None:
        self.header_lines = list(lines)
        logger.debug(f"Header set with {len(self.header_lines)} line(s)")

    def set_footer(self, lines: Iterable[DocText]) -> None:
        self.footer_lines = list(lines)
        logger.debug(f"Footer set with {len(self.footer_lines)} line(s)")

    def apply(self, page: LayoutPage) -> LayoutPage:
        cursor = self.page_size.height
        for doc_text in self.header_lines:
            cursor -= doc_text.text_type.leading
            page.header.append(self._place(doc_text, cursor))

        cursor = 0.0
        for doc_text in self.footer_lines:
            cursor += doc_text.text_type.leading
            page.footer.append(self._place(doc_text, cursor))

        if self.page_number_format:
            page.footer.append(self._page_number(page.number))
        return page

    def _place(self, doc_text: DocText, cursor: float) -> PlacedLine:
        return PlacedLine(
            doc_text=doc_text,
            x=doc_text.x_start,
            y=cursor,
            spans=self.resolver.resolve(doc_text, cursor),
        )

    def _page_number(self, number: int) -> PlacedLine:
        text = self.page_number_format.format(page=number)
        text_type = TextType.PAGE_NUMBER
        width = self.resolver.metrics.text_width(text, text_type)
        x_start = self.page_size.width - self.margins.right - width
        doc_text = DocText(text, x_start, text_type, single_fragment(len(text)))
        return self._place(doc_text, text_type.leading)
