"""
PDF to PNG conversion.

Loads a PDF from a path or buffer, renders the selected pages one at a time
and returns a ``PngPageOutput`` per rendered page, optionally writing each
PNG to an output folder.
"""
from __future__ import annotations

import asyncio
import contextvars
import functools
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import Any, Mapping

from pdftopng.core.config import ConversionDefaults, settings
from pdftopng.core.verbosity import apply_verbosity, get_logger
from pdftopng.schemas.options import PdfToPngOptions, ResolvedOptions, resolve_options
from pdftopng.schemas.output import PngPageOutput
from pdftopng.services.canvas import CanvasFactory
from pdftopng.services.pages import is_page_in_range, select_page_numbers
from pdftopng.services.pdf_engine import (
    DocumentHandle,
    Viewport,
    init_params_from_options,
    load_document,
)
from pdftopng.services.scale import resolve_scale
from pdftopng.services.source import PdfSource, resolve_source
from pdftopng.services.storage import OutputFolder, page_file_name, resolve_base_name

logger = get_logger(__name__)

# pdfium is not thread-safe: every engine call goes through this one thread
_pdfium_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pdfium")


async def _in_executor(executor: ThreadPoolExecutor | None, func, *args):
    # run_in_executor does not carry context variables (verbosity) to the worker
    loop = asyncio.get_running_loop()
    ctx = contextvars.copy_context()
    return await loop.run_in_executor(executor, functools.partial(ctx.run, func, *args))


def _render_page(
    document: DocumentHandle, page_number: int, options: ResolvedOptions
) -> tuple[bytes, Viewport]:
    canvas_factory = document.params.canvas_factory
    with document.get_page(page_number) as page:
        natural = page.get_viewport(scale=1.0)
        viewport = page.get_viewport(scale=resolve_scale(natural, options))
        with canvas_factory.surface(*viewport.pixel_size) as surface:
            page.render(surface, viewport)
            return surface.encode_to_png(), viewport


async def _convert_pages(
    document: DocumentHandle, base_name: str, options: ResolvedOptions
) -> list[PngPageOutput]:
    total_pages = document.page_count
    page_numbers = select_page_numbers(
        total_pages,
        options.pages_to_process,
        strict=options.strict_pages_to_process,
    )

    output_folder = None
    if options.output_folder:
        output_folder = OutputFolder(options.output_folder)
        await _in_executor(None, output_folder.ensure)

    pages: list[PngPageOutput] = []
    for page_number in page_numbers:
        if not is_page_in_range(page_number, total_pages):
            # "first n pages of every PDF" callers rely on short documents being fine
            logger.debug("Skipping page %d, document has %d page(s)", page_number, total_pages)
            continue

        content, viewport = await _in_executor(
            _pdfium_executor, _render_page, document, page_number, options
        )
        name = page_file_name(base_name, page_number)
        path = ""
        if output_folder is not None:
            path = await _in_executor(None, output_folder.save_bytes, name, content)
            logger.info("Wrote page %d to %s", page_number, path)

        pages.append(
            PngPageOutput(
                page_number=page_number,
                name=name,
                content=content,
                path=path,
                width=viewport.width,
                height=viewport.height,
            )
        )
    return pages


async def pdf_to_png(
    source: PdfSource,
    options: PdfToPngOptions | Mapping[str, Any] | None = None,
    *,
    defaults: ConversionDefaults | None = None,
) -> list[PngPageOutput]:
    """
    Convert a PDF to PNG images, one per selected page.

    Args:
        source: Path to the PDF file, or a bytes-like object holding it.
        options: ``PdfToPngOptions`` or a mapping of its fields (snake_case
            or camelCase). Omitted fields fall back to ``defaults``.
        defaults: Library defaults; taken from ``settings`` when omitted.

    Returns:
        One ``PngPageOutput`` per rendered page, in request order.

    Raises:
        OSError: the input file cannot be read or an output file cannot be written.
        pypdfium2.PdfiumError: the engine rejects the document.
        InvalidPagesError: strict mode and a requested page is out of range.

    Files written before a failure stay on disk; nothing is returned.
    """
    resolved = resolve_options(options, defaults or settings.conversion_defaults())

    with apply_verbosity(resolved.verbosity_level):
        src = await _in_executor(None, resolve_source, source)
        base_name = resolve_base_name(
            resolved.output_file_mask, src.stem, resolved.default_output_file_mask
        )
        params = replace(init_params_from_options(resolved), canvas_factory=CanvasFactory())
        document = await _in_executor(_pdfium_executor, load_document, src.data, params)
        try:
            return await _convert_pages(document, base_name, resolved)
        finally:
            await _in_executor(_pdfium_executor, document.cleanup)


def pdf_to_png_sync(
    source: PdfSource,
    options: PdfToPngOptions | Mapping[str, Any] | None = None,
    *,
    defaults: ConversionDefaults | None = None,
) -> list[PngPageOutput]:
    """Blocking variant of ``pdf_to_png`` for callers without an event loop."""
    return asyncio.run(pdf_to_png(source, options, defaults=defaults))
