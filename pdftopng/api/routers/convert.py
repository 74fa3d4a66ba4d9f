from __future__ import annotations

import logging
from pathlib import Path

import pypdfium2 as pdfium
from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from pydantic import ValidationError

from pdftopng.core.config import settings
from pdftopng.schemas import ConvertResponse, PdfToPngOptions, PngPageResponse
from pdftopng.services.converter import pdf_to_png
from pdftopng.services.pages import InvalidPagesError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/convert", tags=["convert"])


@router.post("", response_model=ConvertResponse)
async def convert_pdf(
    file: UploadFile = File(...),
    target_width: float | None = Query(None),
    target_height: float | None = Query(None),
    viewport_scale: float | None = Query(None),
    pages: list[int] | None = Query(None, description="Repeat for several pages"),
    strict_pages: bool = Query(False),
    password: str | None = Query(None),
    mask: str | None = Query(None, description="Base name of the generated files"),
    enable_xfa: bool | None = Query(None),
) -> ConvertResponse:
    """Render an uploaded PDF and return every page as base64 PNG."""
    if file.filename is None:
        raise HTTPException(status_code=400, detail="Missing filename")

    data = await file.read()
    if not data:
        raise HTTPException(status_code=400, detail="Empty upload")
    if len(data) > settings.max_upload_mb * 1024 * 1024:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.max_upload_mb} MB",
        )

    try:
        options = PdfToPngOptions(
            target_width=target_width,
            target_height=target_height,
            viewport_scale=viewport_scale,
            pages_to_process=pages,
            strict_pages_to_process=strict_pages,
            pdf_file_password=password,
            # uploads arrive as buffers, so name pages after the uploaded file
            output_file_mask=mask or Path(file.filename).stem or None,
            enable_xfa=enable_xfa,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.errors(include_url=False)) from e

    try:
        rendered = await pdf_to_png(data, options)
    except InvalidPagesError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except pdfium.PdfiumError as e:
        logger.warning("Rejected upload %s: %s", file.filename, e)
        raise HTTPException(
            status_code=422,
            detail=f"Could not open PDF: {e}",
        ) from e

    return ConvertResponse(
        filename=file.filename,
        page_count=len(rendered),
        pages=[PngPageResponse.from_output(p) for p in rendered],
    )
