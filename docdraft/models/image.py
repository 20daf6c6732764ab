"""Inline image model."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Tuple, Union

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from .base import Node
from .style import StyleMap
from ..exceptions import MediaError
from ..utils.enums import Attribute

if TYPE_CHECKING:
    from ..backend.base import Handle

logger = logging.getLogger(__name__)


class Image(Node):
    """
    Represents an inline image appended to its element.

    The image contributes no text, so it never advances the running offset
    of the owning element. Width and height live in the image StyleMap and
    are applied to the image handle the backend returns.
    """

    def __init__(self):
        """Initialize image."""
        super().__init__()
        self._blob: Optional[bytes] = None
        self.style = StyleMap()

    def blob(self, value: bytes) -> "Image":
        """Set the image data."""
        self._blob = value
        return self

    def width(self, value: Union[int, float]) -> "Image":
        self.style.set(Attribute.WIDTH, value)
        return self

    def height(self, value: Union[int, float]) -> "Image":
        self.style.set(Attribute.HEIGHT, value)
        return self

    def scale(self, factor: Union[int, float] = 1) -> "Image":
        """
        Multiply both dimensions by ``factor``.

        Raises:
            MediaError: If width or height is not set yet, or factor is not positive
        """
        if factor <= 0:
            raise MediaError("Scale factor must be positive", repr(factor))
        if Attribute.WIDTH not in self.style or Attribute.HEIGHT not in self.style:
            raise MediaError("Cannot scale an image without width and height")

        self.style.set(Attribute.WIDTH, self.style[Attribute.WIDTH] * factor)
        self.style.set(Attribute.HEIGHT, self.style[Attribute.HEIGHT] * factor)
        return self

    def from_chart(self, chart: Any) -> "Image":
        """
        Take blob and dimensions from a built chart.

        Args:
            chart: Object exposing ``get_blob()`` and ``get_options()``
                   where options carry ``width`` and ``height``
        """
        options = chart.get_options()
        try:
            width, height = options["width"], options["height"]
        except KeyError as e:
            raise MediaError("Chart options have no dimensions", str(e)) from e

        self._blob = chart.get_blob()
        self.style.set(Attribute.WIDTH, width)
        self.style.set(Attribute.HEIGHT, height)
        logger.debug(f"Image taken from chart: {width}x{height}, {len(self._blob)} bytes")
        return self

    def from_file(self, path: Union[str, Path]) -> "Image":
        """Load image data from disk, sizing the image to its pixel dimensions."""
        path = Path(path)
        if not path.exists():
            raise MediaError("Image file not found", str(path))

        data = path.read_bytes()
        try:
            with PILImage.open(path) as pil_img:
                width, height = pil_img.size
        except UnidentifiedImageError as e:
            raise MediaError("Unrecognised image file", str(path)) from e

        self._blob = data
        self.style.set(Attribute.WIDTH, width)
        self.style.set(Attribute.HEIGHT, height)
        return self

    def get_blob(self) -> Optional[bytes]:
        return self._blob

    def get_size(self) -> Tuple[Any, Any]:
        """Get image size as ``(width, height)``; unset dimensions are None."""
        return (self.style.get(Attribute.WIDTH), self.style.get(Attribute.HEIGHT))

    def apply(self, handle: "Handle", start: int, end: int) -> None:
        if self._blob is None:
            raise MediaError("Image has no blob to insert")
        image_handle = handle.append_inline_image(self._blob)
        image_handle.set_attributes(self.style)

    def describe(self):
        return {
            'type': 'Image',
            'bytes': len(self._blob) if self._blob is not None else 0,
            'style': self.style.to_dict(),
        }
