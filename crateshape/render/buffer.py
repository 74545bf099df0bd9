"""RGBA pixel buffers handed to the presentation layer."""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from crateshape.render.bounds import Bounds

FOREGROUND = np.array([255, 255, 255, 255], dtype=np.uint8)


@dataclass
class PixelBuffer:
    """RGBA pixels indexed [y, x] with row 0 at the bottom (texture order)."""

    pixels: NDArray[np.uint8]
    pivot: tuple[float, float]
    name: str = ""

    @classmethod
    def blank(cls, bounds: Bounds, name: str = "") -> PixelBuffer:
        pixels = np.zeros((bounds.height, bounds.width, 4), dtype=np.uint8)
        return cls(pixels=pixels, pivot=bounds.pivot, name=name)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def foreground_mask(self) -> NDArray[np.bool_]:
        return np.all(self.pixels == FOREGROUND, axis=-1)

    def foreground_count(self) -> int:
        return int(np.count_nonzero(self.foreground_mask()))

    def paint(self, mask: NDArray[np.bool_]) -> None:
        self.pixels[mask] = FOREGROUND

    def to_image(self) -> Image.Image:
        """Pillow RGBA image, rows flipped so the top row comes first."""
        return Image.fromarray(np.ascontiguousarray(np.flipud(self.pixels)))

    def to_png(self) -> bytes:
        out = io.BytesIO()
        self.to_image().save(out, format="PNG")
        return out.getvalue()

    def to_png_base64(self) -> str:
        return base64.b64encode(self.to_png()).decode("ascii")
