from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from reportlab.pdfbase import pdfmetrics  # type: ignore
from reportlab.pdfbase.ttfonts import TTFError, TTFont  # type: ignore

from ...exceptions import FontError

logger = logging.getLogger(__name__)

_REGISTERED: set[str] = set()


def register_font(font_name: str, font_path: Union[str, Path]) -> str:
    """

    Registers a TrueType font file with ReportLab under ``font_name``.

    Registering the same name twice is a no-op, so documents sharing a font
    only parse the file once per process.

    Args:
    font_name: Name the font is referenced by when drawing and measuring
    font_path: Path to the *.ttf file

    Returns:
    The registered font name

    """
    if font_name in _REGISTERED:
        return font_name
    path = Path(font_path)
    if not path.is_file():
        raise FontError(f"Font file for {font_name} not found", str(path))
    try:
        pdfmetrics.registerFont(TTFont(font_name, str(path)))
    except (TTFError, OSError) as exc:
        raise FontError(f"Could not load font {font_name}", str(exc)) from exc
    _REGISTERED.add(font_name)
    logger.debug("Registered font %s (%s)", font_name, path)
    return font_name


def ensure_font(font_name: str, font_path: Optional[Union[str, Path]] = None) -> str:
    """Makes sure ``font_name`` can be used, registering ``font_path`` first when given."""
    if font_path is not None:
        return register_font(font_name, font_path)
    # standard 14 fonts are resolved lazily by ReportLab
    try:
        pdfmetrics.getFont(font_name)
    except KeyError as exc:
        raise FontError(f"Unknown font {font_name}", "register a TrueType file for it") from exc
    return font_name
