from __future__ import annotations

from pdftopng.schemas.options import PdfToPngOptions, ResolvedOptions, resolve_options
from pdftopng.schemas.output import ConvertResponse, PngPageOutput, PngPageResponse

__all__ = [
    "ConvertResponse",
    "PdfToPngOptions",
    "PngPageOutput",
    "PngPageResponse",
    "ResolvedOptions",
    "resolve_options",
]
