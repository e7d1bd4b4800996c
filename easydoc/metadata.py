"""
Document information (PDF Info dictionary) for generated documents.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional


class Trapped(str, Enum):
    """Tri-state trapping flag of the PDF Info dictionary."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"

    @classmethod
    def from_flag(cls, value: Optional[bool]) -> "Trapped":
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE


def format_pdf_date(value: datetime) -> str:
    """

    Formats a datetime as a PDF date string.

    Args:
    value: Date to format; naive datetimes are written without offset

    Returns:
    String like ``D:20240131120000+01'00'``

    """
    text = value.strftime("D:%Y%m%d%H%M%S")
    offset = value.utcoffset()
    if offset is None:
        return text
    minutes = int(offset.total_seconds() // 60)
    sign = "+" if minutes >= 0 else "-"
    minutes = abs(minutes)
    return f"{text}{sign}{minutes // 60:02d}'{minutes % 60:02d}'"


@dataclass(frozen=True, slots=True)
class DocumentInfo:
    """Write-once metadata of a generated document."""

    creator: Optional[str] = None
    author: Optional[str] = None
    producer: Optional[str] = None
    title: Optional[str] = None
    subject: Optional[str] = None
    creation_date: Optional[datetime] = None
    keywords: Optional[str] = None
    trapped: Trapped = Trapped.UNKNOWN

    def to_pdf_info(self) -> Dict[str, str]:
        """Info dictionary entries keyed by PDF name; unset fields are left out."""
        info: Dict[str, str] = {}
        for key, value in (
            ("/Creator", self.creator),
            ("/Author", self.author),
            ("/Producer", self.producer),
            ("/Title", self.title),
            ("/Subject", self.subject),
            ("/Keywords", self.keywords),
        ):
            if value is not None:
                info[key] = value
        if self.creation_date is not None:
            date = format_pdf_date(self.creation_date)
            info["/CreationDate"] = date
            info["/ModDate"] = date
        return info
