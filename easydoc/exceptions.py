"""Custom exceptions for easydoc."""

from typing import Optional


class EasyDocError(Exception):
    """Base exception for easydoc errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class LayoutError(EasyDocError):
    """Exception raised when layout cannot continue (e.g. glyph metrics are unavailable)."""

    pass


class StateError(EasyDocError):
    """Exception raised when a write-once document property is set twice."""

    pass


class RenderingError(EasyDocError):
    """Exception raised while rendering pages or serializing the final document."""

    pass


class FontError(EasyDocError):
    """Exception raised during font registration or lookup."""

    pass
