"""Layout engine: line wrapping, fragment geometry and page flow."""

from .assembler import DocumentAssembler
from .content_queue import ContentQueue, PageInsertQueue
from .fragments import FontFragmentResolver, FragmentSpan, UnderlineStroke
from .geometry import Margins, Size
from .glyph_metrics import GlyphMetricsCache, ReportLabMetricsProvider, shared_metrics_cache
from .header_footer import HeaderFooterRenderer
from .line_wrapper import LineWrapper, WrappedLine
from .models import DocText, FontFragment
from .page_flow import FlowState, PageFlowEngine
from .text_types import TEXT_STYLES, TextStyle, TextType
from .unified_layout import LayoutPage, PlacedLine, SplicedBlock

__all__ = [
    "ContentQueue",
    "DocText",
    "DocumentAssembler",
    "FlowState",
    "FontFragment",
    "FontFragmentResolver",
    "FragmentSpan",
    "GlyphMetricsCache",
    "HeaderFooterRenderer",
    "LayoutPage",
    "LineWrapper",
    "Margins",
    "PageFlowEngine",
    "PageInsertQueue",
    "PlacedLine",
    "ReportLabMetricsProvider",
    "Size",
    "SplicedBlock",
    "TEXT_STYLES",
    "TextStyle",
    "TextType",
    "UnderlineStroke",
    "WrappedLine",
    "shared_metrics_cache",
]
