from __future__ import annotations

import io
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from PIL import Image


@dataclass
class CanvasSurface:
    """In-memory RGB raster that a page gets painted onto."""
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def encode_to_png(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()


class CanvasFactory:
    """Allocates and releases canvas surfaces, one per rendered page."""

    def __init__(self, background: tuple[int, int, int] = (255, 255, 255)):
        self.background = background
        self.live_surfaces = 0

    def create(self, width: int, height: int) -> CanvasSurface:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid canvas size {width}x{height}")
        surface = CanvasSurface(Image.new("RGB", (width, height), color=self.background))
        self.live_surfaces += 1
        return surface

    def destroy(self, surface: CanvasSurface) -> None:
        surface.image.close()
        self.live_surfaces -= 1

    @contextmanager
    def surface(self, width: int, height: int) -> Iterator[CanvasSurface]:
        surface = self.create(width, height)
        try:
            yield surface
        finally:
            self.destroy(surface)
