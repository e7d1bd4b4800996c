"""Default collaborators: ReportLab page drawing and pypdf document assembly."""

from .pdf_renderer import ReportLabPageRenderer
from .serializer import PdfDocumentSerializer

__all__ = ["ReportLabPageRenderer", "PdfDocumentSerializer"]
