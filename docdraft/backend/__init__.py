"""
Backends drafts are applied to.
"""

from .base import Backend, Handle, EditableText, ImageHandle
from .memory import MemoryBackend, MemoryBlock, MemoryImage, MemoryRule, MemoryText, Span

__all__ = [
    "Backend",
    "Handle",
    "EditableText",
    "ImageHandle",
    "MemoryBackend",
    "MemoryBlock",
    "MemoryImage",
    "MemoryRule",
    "MemoryText",
    "Span",
]
