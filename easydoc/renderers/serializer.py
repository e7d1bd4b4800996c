"""Joins rendered pages and spliced PDF blocks into one document using pypdf."""

from __future__ import annotations

import io
import logging
from typing import Optional, Sequence

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import NameObject

from ..exceptions import RenderingError
from ..metadata import DocumentInfo

logger = logging.getLogger(__name__)


class PdfDocumentSerializer:
    """DocumentSerializer appending every block's pages, in order, to a single PDF."""

    def assemble(self, pages: Sequence[bytes], info: Optional[DocumentInfo] = None) -> Optional[bytes]:
        if not pages:
            return None

        writer = PdfWriter()
        for index, block in enumerate(pages):
            try:
                writer.append(PdfReader(io.BytesIO(block)))
            except PdfReadError as exc:
                raise RenderingError(f"Page block {index} is not a readable PDF", str(exc)) from exc

        if info is not None:
            writer.add_metadata(info.to_pdf_info())
            # add_metadata stores text strings only, /Trapped must be a name
            writer._info[NameObject("/Trapped")] = NameObject(f"/{info.trapped.value}")

        output = io.BytesIO()
        writer.write(output)
        data = output.getvalue()
        logger.info(f"Serialized {len(writer.pages)} page(s) from {len(pages)} block(s), {len(data)} bytes")
        return data
