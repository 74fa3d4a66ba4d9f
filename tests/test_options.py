from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from pdftopng.core.config import ConversionDefaults, Settings
from pdftopng.schemas import PdfToPngOptions, resolve_options


def test_resolve_without_options_uses_defaults(defaults):
    resolved = resolve_options(None, defaults)

    assert resolved.default_viewport_scale == 1.0
    assert resolved.default_output_file_mask == "buffer"
    assert resolved.disable_font_face is True
    assert resolved.use_system_fonts is False
    assert resolved.enable_xfa is True
    assert resolved.strict_pages_to_process is False
    assert resolved.verbosity_level == 0
    assert resolved.viewport_scale is None
    assert resolved.pages_to_process is None
    assert resolved.output_folder is None


def test_caller_options_override_defaults(defaults):
    options = PdfToPngOptions(
        enable_xfa=False,
        disable_font_face=False,
        verbosity_level=5,
        pages_to_process=[3, 1, 3],
        strict_pages_to_process=True,
    )
    resolved = resolve_options(options, defaults)

    assert resolved.enable_xfa is False
    assert resolved.disable_font_face is False
    assert resolved.verbosity_level == 5
    assert resolved.pages_to_process == (3, 1, 3)
    assert resolved.strict_pages_to_process is True


def test_resolve_does_not_touch_inputs():
    defaults = ConversionDefaults(output_file_mask="doc")
    options = PdfToPngOptions(pages_to_process=[1])
    resolve_options(options, defaults)

    assert options.pages_to_process == [1]
    assert defaults.output_file_mask == "doc"


def test_camel_case_mapping_is_accepted(defaults):
    resolved = resolve_options(
        {
            "targetWidth": 600,
            "viewportScale": 2,
            "outputFileMask": "scan",
            "pagesToProcess": [2],
            "strictPagesToProcess": True,
            "pdfFilePassword": "secret",
        },
        defaults,
    )

    assert resolved.target_width == 600
    assert resolved.viewport_scale == 2
    assert resolved.output_file_mask == "scan"
    assert resolved.pages_to_process == (2,)
    assert resolved.strict_pages_to_process is True
    assert resolved.pdf_file_password == "secret"


def test_empty_strings_count_as_unset(defaults):
    resolved = resolve_options({"output_folder": "", "output_file_mask": ""}, defaults)

    assert resolved.output_folder is None
    assert resolved.output_file_mask is None


@pytest.mark.parametrize("field", ["target_width", "target_height", "viewport_scale"])
def test_non_positive_dimensions_rejected(field):
    with pytest.raises(ValidationError):
        PdfToPngOptions(**{field: 0})


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        PdfToPngOptions.coerce({"dpi": 300})


def test_settings_build_conversion_defaults(monkeypatch):
    monkeypatch.setenv("PDFTOPNG_DEFAULT_OUTPUT_FILE_MASK", "page")
    monkeypatch.setenv("PDFTOPNG_DEFAULT_VIEWPORT_SCALE", "2.5")

    defaults = Settings().conversion_defaults()

    assert defaults.output_file_mask == "page"
    assert defaults.viewport_scale == 2.5


def test_settings_cors_origins_list():
    s = Settings(cors_origins=["http://a.test", " ", "http://b.test"])
    assert s.cors_origins_list() == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("field", ["target_width", "target_height", "viewport_scale"])
@pytest.mark.parametrize("value", [math.inf, math.nan])
def test_non_finite_dimensions_rejected(field, value):
    with pytest.raises(ValidationError):
        PdfToPngOptions(**{field: value})


@pytest.mark.parametrize("field", ["disable_font_face", "use_system_fonts"])
def test_font_toggles_documented_as_no_effect(field):
    assert "no effect" in PdfToPngOptions.model_fields[field].description
