"""
Pydantic schemas for conversion options.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pdftopng.core.config import ConversionDefaults


class PdfToPngOptions(BaseModel):
    """Caller supplied options. Every field is optional."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    target_width: float | None = Field(
        None, gt=0, allow_inf_nan=False, description="Fit page to this width in pixels"
    )
    target_height: float | None = Field(
        None, gt=0, allow_inf_nan=False, description="Fit page to this height in pixels"
    )
    viewport_scale: float | None = Field(
        None, gt=0, allow_inf_nan=False, description="Explicit scale, overrides targets"
    )
    disable_font_face: bool | None = Field(
        None, description="Accepted for compatibility; no effect, pdfium resolves fonts itself"
    )
    use_system_fonts: bool | None = Field(
        None, description="Accepted for compatibility; no effect, pdfium resolves fonts itself"
    )
    enable_xfa: bool | None = None
    pdf_file_password: str | None = None
    output_folder: str | None = None
    output_file_mask: str | None = None
    pages_to_process: list[int] | None = None
    strict_pages_to_process: bool | None = None
    verbosity_level: int | None = None

    @classmethod
    def coerce(cls, value: PdfToPngOptions | Mapping[str, Any] | None) -> PdfToPngOptions:
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        return cls.model_validate(dict(value))


class ResolvedOptions(BaseModel):
    """Options with every library default filled in."""

    model_config = ConfigDict(frozen=True)

    target_width: float | None
    target_height: float | None
    viewport_scale: float | None
    default_viewport_scale: float
    disable_font_face: bool
    use_system_fonts: bool
    enable_xfa: bool
    pdf_file_password: str | None
    output_folder: str | None
    output_file_mask: str | None
    default_output_file_mask: str
    pages_to_process: tuple[int, ...] | None
    strict_pages_to_process: bool
    verbosity_level: int


def _pick(value, default):
    return default if value is None else value


def resolve_options(
    options: PdfToPngOptions | Mapping[str, Any] | None,
    defaults: ConversionDefaults,
) -> ResolvedOptions:
    """Merge caller options onto ``defaults``. Pure; neither input is modified."""
    opts = PdfToPngOptions.coerce(options)
    pages = opts.pages_to_process
    return ResolvedOptions(
        target_width=opts.target_width,
        target_height=opts.target_height,
        viewport_scale=opts.viewport_scale,
        default_viewport_scale=defaults.viewport_scale,
        disable_font_face=_pick(opts.disable_font_face, defaults.disable_font_face),
        use_system_fonts=_pick(opts.use_system_fonts, defaults.use_system_fonts),
        enable_xfa=_pick(opts.enable_xfa, defaults.enable_xfa),
        pdf_file_password=opts.pdf_file_password,
        # empty strings mean "not set", same as omitting the option
        output_folder=opts.output_folder or None,
        output_file_mask=opts.output_file_mask or None,
        default_output_file_mask=defaults.output_file_mask,
        pages_to_process=tuple(pages) if pages is not None else None,
        strict_pages_to_process=_pick(
            opts.strict_pages_to_process, defaults.strict_pages_to_process
        ),
        verbosity_level=_pick(opts.verbosity_level, defaults.verbosity_level),
    )
