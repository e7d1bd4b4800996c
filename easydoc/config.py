"""Configuration for document layout: page size, margins and fonts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from numbers import Real
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from reportlab.lib.pagesizes import A4

from .constants import BOLD, REGULAR
from .engine.geometry import Margins, Size
from .engine.utils.font_registry import ensure_font

logger = logging.getLogger(__name__)

MarginsLike = Union[Margins, Real, Sequence[float], Mapping[str, float]]


def coerce_margins(value: MarginsLike) -> Margins:
    """

    Builds Margins from the accepted shorthand forms.

    Args:
    value: Margins instance, a single number (all sides), a pair
    ``(vertical, horizontal)``, four numbers ``(top, right, bottom, left)``
    or a dict with any of ``top``/``right``/``bottom``/``left``

    Returns:
    Margins instance

    """
    if isinstance(value, Margins):
        return value
    if isinstance(value, Real):
        return Margins.uniform(float(value))
    if isinstance(value, Mapping):
        return Margins(**{key: float(side) for key, side in value.items()})
    values = [float(side) for side in value]
    if len(values) == 1:
        return Margins.uniform(values[0])
    if len(values) == 2:
        return Margins.symmetric(values[0], values[1])
    if len(values) == 4:
        top, right, bottom, left = values
        return Margins(top=top, bottom=bottom, left=left, right=right)
    raise ValueError(f"Expected 1, 2 or 4 margin values, got {len(values)}")


def coerce_size(value: Union[Size, Sequence[float]]) -> Size:
    if isinstance(value, Size):
        return value
    return Size.from_tuple(value)


@dataclass(slots=True)
class DocumentConfig:
    """Layout configuration of one document."""
    page_size: Size = field(default_factory=lambda: Size.from_tuple(A4))
    margins: Margins = field(default_factory=Margins)
    regular_font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    regular_font_path: Optional[Union[str, Path]] = None
    bold_font_path: Optional[Union[str, Path]] = None
    page_number_format: Optional[str] = None  # e.g. "Page {page}"

    def __post_init__(self):
        self.page_size = coerce_size(self.page_size)
        self.margins = coerce_margins(self.margins)
        if self.margins.left + self.margins.right >= self.page_size.width:
            raise ValueError("Horizontal margins leave no room for text")

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None) -> "DocumentConfig":
        """Builds a config from an options dict; unknown keys are rejected."""
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown document options: {', '.join(unknown)}")
        return cls(**options)

    @property
    def fonts(self) -> Dict[str, str]:
        """Font name for each fragment style id."""
        return {REGULAR: self.regular_font, BOLD: self.bold_font}

    def register_fonts(self) -> None:
        """Makes the configured fonts available to ReportLab."""
        ensure_font(self.regular_font, self.regular_font_path)
        ensure_font(self.bold_font, self.bold_font_path)
        logger.debug(f"Fonts ready: regular={self.regular_font}, bold={self.bold_font}")
