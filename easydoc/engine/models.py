"""Immutable value records queued for layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .text_types import TextType


@dataclass(frozen=True, slots=True)
class FontFragment:
    """A run of ``char_count`` characters sharing one font style and underline flag."""

    char_count: int
    style_id: str
    underlined: bool = False

    def __post_init__(self):
        if self.char_count < 0:
            raise ValueError("char_count must not be negative")


@dataclass(frozen=True, slots=True)
class DocText:
    """One laid-out line waiting in the content queue, or a control marker.

    Markers (NEWLINE, PAGE_BREAK, INSERT_PAGE) carry neither text nor fragments.
    """

    text: Optional[str]
    x_start: float
    text_type: TextType
    fragments: Optional[Tuple[FontFragment, ...]] = None

    def __post_init__(self):
        if self.text_type.is_sentinel:
            return
        if self.text is None or self.fragments is None:
            raise ValueError(f"{self.text_type.value} line needs text and fragments")
        covered = sum(fragment.char_count for fragment in self.fragments)
        if covered != len(self.text):
            raise ValueError(
                f"Fragments cover {covered} characters but the line has {len(self.text)}"
            )

    @classmethod
    def sentinel(cls, text_type: TextType) -> "DocText":
        if not text_type.is_sentinel:
            raise ValueError(f"{text_type.value} is not a control marker")
        return cls(text=None, x_start=0.0, text_type=text_type)

    @property
    def is_sentinel(self) -> bool:
        return self.text_type.is_sentinel


NEWLINE_MARKER = DocText.sentinel(TextType.NEWLINE)
PAGE_BREAK_MARKER = DocText.sentinel(TextType.PAGE_BREAK)
INSERT_PAGE_MARKER = DocText.sentinel(TextType.INSERT_PAGE)
