"""
Document - the API for easy PDF creation.

Text requests are wrapped into lines as they are added and queued; nothing
is laid out or rendered until ``convert()`` or ``save()`` is called.

Example:
    doc = Document(50)
    doc.set_header("ACME Corp. - internal")
    doc.add_heading("Quarterly report", bold=True)
    doc.add_title_value("Author", "Jane Doe")
    doc.add_paragraph(long_text)
    doc.add_pages(appendix_pdf_bytes)
    pdf_bytes = doc.convert()
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .config import DocumentConfig, coerce_margins
from .constants import BOLD, COLON_SPACE, NEW_LINE, REGULAR
from .engine.assembler import DocumentAssembler
from .engine.content_queue import ContentQueue, PageInsertQueue
from .engine.fragments import FontFragmentResolver, expand_fragment_tabs, single_fragment, slice_fragments
from .engine.geometry import Margins
from .engine.glyph_metrics import GlyphMetricsCache, metrics_by_style
from .engine.header_footer import HeaderFooterRenderer
from .engine.line_wrapper import LineWrapper
from .engine.models import INSERT_PAGE_MARKER, NEWLINE_MARKER, PAGE_BREAK_MARKER, DocText, FontFragment
from .engine.page_flow import PageFlowEngine
from .engine.text_types import TextType
from .interfaces import DocumentSerializer, PageRenderer
from .metadata import DocumentInfo, Trapped
from .renderers import PdfDocumentSerializer, ReportLabPageRenderer

logger = logging.getLogger(__name__)


class Document:
    """

    Collects headings, paragraphs, lists and inserted pages and lays them
    out into pages.

    Margins follow the shorthand of ``coerce_margins``: ``Document(40)``,
    ``Document(60, 40)`` (vertical, horizontal) or
    ``Document(60, 40, 60, 40)`` (top, right, bottom, left).

    A document instance is meant to be filled and converted by one thread.
    Converting consumes the queued content.

    """

    def __init__(
        self,
        *margins: float,
        config: Optional[DocumentConfig] = None,
        metrics: Optional[GlyphMetricsCache] = None,
        style_metrics: Optional[Mapping[str, GlyphMetricsCache]] = None,
        renderer: Optional[PageRenderer] = None,
        serializer: Optional[DocumentSerializer] = None,
    ):
        config = config or DocumentConfig()
        if margins:
            config = dataclasses.replace(config, margins=coerce_margins(margins))
        self.config = config

        if metrics is None:
            config.register_fonts()
            style_metrics = metrics_by_style(config.fonts)
            metrics = style_metrics[REGULAR]
        self.metrics = metrics
        self.style_metrics = dict(style_metrics or {})

        self.content = ContentQueue()
        self.inserts = PageInsertQueue()
        self.wrapper = LineWrapper(metrics, self.style_metrics)
        self.resolver = FontFragmentResolver(metrics, self.style_metrics)
        self.header_footer = HeaderFooterRenderer(
            self.resolver,
            config.page_size,
            config.margins,
            page_number_format=config.page_number_format,
        )
        self.flow_engine = PageFlowEngine(
            self.content,
            self.inserts,
            self.resolver,
            self.header_footer,
            config.page_size,
            config.margins,
        )
        self.assembler = DocumentAssembler(
            self.flow_engine,
            renderer or ReportLabPageRenderer(),
            serializer or PdfDocumentSerializer(),
            config.fonts,
        )

    @property
    def margins(self) -> Margins:
        return self.config.margins

    # ----------------------------------------------------------------------
    # Content
    # ----------------------------------------------------------------------

    def add_heading(self, text: str, bold: bool = False, underlined: bool = False) -> None:
        self._to_buffer(text, self.margins.left, TextType.HEADING, single_fragment(len(text), bold, underlined))

    def add_sub_heading(self, text: str, bold: bool = False, underlined: bool = False) -> None:
        self._to_buffer(text, self.margins.left, TextType.SUB_HEADING, single_fragment(len(text), bold, underlined))

    def add_paragraph(self, text: str, bold: bool = False, underlined: bool = False) -> None:
        self._to_buffer(text, self.margins.left, TextType.PARAGRAPH, single_fragment(len(text), bold, underlined))

    def add_list(
        self,
        items: Union[str, Iterable[str]],
        delimiter: str = "",
        indent: float = 0.0,
        bold: bool = False,
        underlined: bool = False,
    ) -> None:
        """

        Adds list items, one queued entry per item.

        Args:
        items: Items, or one string with an item per line
        delimiter: Bullet prepended to every item (e.g. "- "); never underlined
        indent: Extra indent from the left margin
        bold: Whether items are bold
        underlined: Whether item texts are underlined

        """
        if isinstance(items, str):
            items = items.split(NEW_LINE)
        x_start = self.margins.left + indent
        style_id = BOLD if bold else REGULAR
        for item in items:
            fragments: List[FontFragment] = []
            if delimiter:
                fragments.append(FontFragment(len(delimiter), style_id, False))
            fragments.append(FontFragment(len(item), style_id, underlined))
            self._to_buffer(delimiter + item, x_start, TextType.LIST, fragments)

    def add_title_value(self, title: str, value: str, bold: bool = True, underlined: bool = True) -> None:
        """Adds a ``title: value`` paragraph; only the title carries the bold/underline styling."""
        line = title + COLON_SPACE + value
        fragments = (
            FontFragment(len(title), BOLD if bold else REGULAR, underlined),
            FontFragment(len(line) - len(title), REGULAR, False),
        )
        self._to_buffer(line, self.margins.left, TextType.PARAGRAPH, fragments)

    def add_newline(self) -> None:
        self.content.append(NEWLINE_MARKER)

    def add_page_break(self) -> None:
        """Inserts a break point for the page."""
        self.content.append(PAGE_BREAK_MARKER)

    def add_pages(self, page_data: bytes) -> None:
        """

        Queues pre-rendered PDF pages to be inserted verbatim at this point.

        Args:
        page_data: Bytes of a complete PDF document

        """
        if not page_data:
            raise ValueError("page_data must not be empty")
        self.inserts.append(page_data)
        self.content.append(INSERT_PAGE_MARKER)
        logger.debug(f"Queued {len(page_data)} bytes of inserted pages")

    # ----------------------------------------------------------------------
    # Header, footer and metadata
    # ----------------------------------------------------------------------

    def set_header(self, text: str, bold: bool = False, underlined: bool = False) -> None:
        self.header_footer.set_header(self._static_lines(text, TextType.HEADER, bold, underlined))

    def set_footer(self, text: str, bold: bool = False, underlined: bool = False) -> None:
        self.header_footer.set_footer(self._static_lines(text, TextType.FOOTER, bold, underlined))

    def set_document_information(
        self,
        creator: Optional[str] = None,
        author: Optional[str] = None,
        producer: Optional[str] = None,
        title: Optional[str] = None,
        subject: Optional[str] = None,
        creation_date: Optional[datetime] = None,
        keywords: Optional[str] = None,
        trapped: Optional[bool] = None,
    ) -> None:
        """

        Sets the document information of the PDF. Can be called once per document.

        Args:
        creator: Document creator
        author: Document author
        producer: Document producer
        title: Document title
        subject: Document subject
        creation_date: Date of creation, also written as modification date
        keywords: Document keywords
        trapped: Trapping flag; None means unknown

        Raises:
        StateError: If the information was already set

        """
        info = DocumentInfo(
            creator=creator,
            author=author,
            producer=producer,
            title=title,
            subject=subject,
            creation_date=creation_date,
            keywords=keywords,
            trapped=Trapped.from_flag(trapped),
        )
        self.assembler.set_info(info)

    @property
    def information(self) -> Optional[DocumentInfo]:
        return self.assembler.info

    # ----------------------------------------------------------------------
    # Output
    # ----------------------------------------------------------------------

    def convert(self) -> Optional[bytes]:
        """Returns the PDF bytes, or None if the document has no pages."""
        return self.assembler.build()

    def save(self, output_path: Union[str, Path]) -> Optional[Path]:
        """Writes the PDF to ``output_path``; returns None and writes nothing for an empty document."""
        data = self.convert()
        if data is None:
            return None
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info(f"PDF saved as {path}")
        return path

    # ----------------------------------------------------------------------
    # Internals
    # ----------------------------------------------------------------------

    def _wrap(
        self,
        text: str,
        x_start: float,
        text_type: TextType,
        fragments: Sequence[FontFragment],
    ) -> List[DocText]:
        text, expanded = expand_fragment_tabs(text, fragments)
        lines = self.wrapper.wrap_spans(
            text,
            x_start,
            text_type,
            self.config.page_size.width,
            self.margins.right,
            expanded,
        )
        return [
            DocText(line.text, x_start, text_type, slice_fragments(expanded, line.start, line.end))
            for line in lines
        ]

    def _to_buffer(
        self,
        text: str,
        x_start: float,
        text_type: TextType,
        fragments: Sequence[FontFragment],
    ) -> None:
        for doc_text in self._wrap(text, x_start, text_type, fragments):
            self.content.append(doc_text)

    def _static_lines(self, text: str, text_type: TextType, bold: bool, underlined: bool) -> Tuple[DocText, ...]:
        fragments = single_fragment(len(text), bold, underlined)
        return tuple(self._wrap(text, self.margins.left, text_type, fragments))
