"""Text style tags and the font size/leading lookup table."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict

LEADING_FACTOR = 1.33


class TextType(str, Enum):
    """Style category of a queued line. The last three tags are control markers only."""

    HEADING = "heading"
    SUB_HEADING = "sub_heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    HEADER = "header"
    FOOTER = "footer"
    PAGE_NUMBER = "page_number"
    NEWLINE = "newline"
    PAGE_BREAK = "page_break"
    INSERT_PAGE = "insert_page"

    @property
    def font_size(self) -> float:
        return TEXT_STYLES[self].font_size

    @property
    def leading(self) -> float:
        return TEXT_STYLES[self].leading

    @property
    def is_sentinel(self) -> bool:
        return self in SENTINEL_TYPES


@dataclass(frozen=True, slots=True)
class TextStyle:
    font_size: float

    @property
    def leading(self) -> float:
        """Vertical space between adjacent baselines."""
        return self.font_size * LEADING_FACTOR


TEXT_STYLES: Dict[TextType, TextStyle] = {
    TextType.HEADING: TextStyle(16),
    TextType.SUB_HEADING: TextStyle(15),
    TextType.PARAGRAPH: TextStyle(12),
    TextType.LIST: TextStyle(11),
    TextType.HEADER: TextStyle(8),
    TextType.FOOTER: TextStyle(8),
    TextType.PAGE_NUMBER: TextStyle(10),
    # a newline is never drawn, its size only defines the blank line height
    TextType.NEWLINE: TextStyle(18),
    TextType.PAGE_BREAK: TextStyle(0),
    TextType.INSERT_PAGE: TextStyle(0),
}

SENTINEL_TYPES = frozenset({TextType.NEWLINE, TextType.PAGE_BREAK, TextType.INSERT_PAGE})
