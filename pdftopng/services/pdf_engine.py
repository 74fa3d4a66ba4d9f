"""
PDF engine adapter over pypdfium2.

Wraps the pdfium document and page objects in small handles that the
converter acquires with ``with`` blocks, so every handle is released on
every exit path.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

import pypdfium2 as pdfium

from pdftopng.core.verbosity import get_logger
from pdftopng.schemas.options import ResolvedOptions
from pdftopng.services.canvas import CanvasFactory, CanvasSurface

logger = get_logger(__name__)


@dataclass(frozen=True)
class DocumentInitParams:
    password: str | None = None
    disable_font_face: bool = True
    use_system_fonts: bool = False
    enable_xfa: bool = True
    verbosity: int = 0
    canvas_factory: CanvasFactory | None = None


def init_params_from_options(options: ResolvedOptions) -> DocumentInitParams:
    """Build loader parameters from resolved options."""
    return DocumentInitParams(
        password=options.pdf_file_password,
        disable_font_face=options.disable_font_face,
        use_system_fonts=options.use_system_fonts,
        enable_xfa=options.enable_xfa,
        verbosity=options.verbosity_level,
    )


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    scale: float

    @property
    def pixel_size(self) -> tuple[int, int]:
        # pdfium sizes bitmaps with ceil(); rounding first keeps 299.99999999 at 300
        return (
            max(1, math.ceil(round(self.width, 6))),
            max(1, math.ceil(round(self.height, 6))),
        )


class PageHandle:
    def __init__(self, page: pdfium.PdfPage, page_number: int, *, draw_forms: bool):
        self._page = page
        self.page_number = page_number
        self._draw_forms = draw_forms
        self._closed = False

    def get_viewport(self, scale: float = 1.0) -> Viewport:
        width, height = self._page.get_size()
        return Viewport(
            width=width * scale,
            height=height * scale,
            scale=scale,
        )

    def render(self, surface: CanvasSurface, viewport: Viewport) -> None:
        """Paint the page onto ``surface`` at ``viewport.scale``."""
        bitmap = self._page.render(
            scale=viewport.scale,
            may_draw_forms=self._draw_forms,
            fill_color=(255, 255, 255, 255),
        )
        try:
            image = bitmap.to_pil()
            if image.mode != "RGB":
                image = image.convert("RGB")
            surface.image.paste(image, (0, 0))
        finally:
            bitmap.close()

    def cleanup(self) -> None:
        if not self._closed:
            self._page.close()
            self._closed = True

    def __enter__(self) -> PageHandle:
        return self

    def __exit__(self, *exc_info) -> None:
        self.cleanup()


class DocumentHandle:
    def __init__(self, pdf: pdfium.PdfDocument, params: DocumentInitParams):
        self._pdf = pdf
        self.params = params
        self._closed = False

    @property
    def page_count(self) -> int:
        return len(self._pdf)

    def get_page(self, page_number: int) -> PageHandle:
        """Return the page with 1-based ``page_number``."""
        if page_number < 1 or page_number > self.page_count:
            raise IndexError(
                f"Page {page_number} out of range (1-{self.page_count})"
            )
        page = self._pdf.get_page(page_number - 1)
        return PageHandle(page, page_number, draw_forms=self.params.enable_xfa)

    def cleanup(self) -> None:
        if not self._closed:
            self._pdf.close()
            self._closed = True

    def __enter__(self) -> DocumentHandle:
        return self

    def __exit__(self, *exc_info) -> None:
        self.cleanup()


def load_document(data: bytes, params: DocumentInitParams) -> DocumentHandle:
    """
    Open ``data`` with pdfium.

    Raises:
        pypdfium2.PdfiumError: corrupt data, wrong or missing password.
    """
    logger.debug(
        "Loading PDF (%d bytes, xfa=%s, disable_font_face=%s, use_system_fonts=%s)",
        len(data),
        params.enable_xfa,
        params.disable_font_face,
        params.use_system_fonts,
    )
    pdf = pdfium.PdfDocument(data, password=params.password)
    try:
        if params.enable_xfa:
            # must happen before the first page is loaded
            pdf.init_forms()
    except Exception:
        pdf.close()
        raise
    handle = DocumentHandle(pdf, params)
    logger.info("Loaded PDF with %d page(s)", handle.page_count)
    return handle
