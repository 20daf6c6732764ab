"""Custom exceptions for docdraft."""

from typing import Optional


class DocDraftError(Exception):
    """Base exception for docdraft errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class StyleError(DocDraftError):
    """Exception raised for unknown style attributes."""

    pass


class RangeError(DocDraftError):
    """Exception raised when a character range falls outside its block text."""

    pass


class GlyphError(DocDraftError):
    """Exception raised when a nesting level has no glyph in strict mode."""

    pass


class MediaError(DocDraftError):
    """Exception raised for images without a blob or dimensions."""

    pass


class ChartError(DocDraftError):
    """Exception raised while building or rendering a chart."""

    pass


class DraftStateError(DocDraftError):
    """Exception raised when a draft or element is applied out of order."""

    pass


class LoaderError(DocDraftError):
    """Exception raised while loading a draft description."""

    pass
