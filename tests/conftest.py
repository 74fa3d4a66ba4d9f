from __future__ import annotations

import io
from pathlib import Path

import pytest
from PIL import Image

from pdftopng.core.config import ConversionDefaults

FIXTURES = Path(__file__).parent / "fixtures"


def build_pdf(sizes: list[tuple[int, int]], colors: list[str] | None = None) -> bytes:
    """Build a PDF with one page per size; Pillow writes 1 px = 1 pt at 72 dpi."""
    colors = colors or ["white"] * len(sizes)
    images = [Image.new("RGB", size, color) for size, color in zip(sizes, colors)]
    buf = io.BytesIO()
    images[0].save(
        buf,
        format="PDF",
        save_all=True,
        append_images=images[1:],
        resolution=72.0,
    )
    return buf.getvalue()


@pytest.fixture
def defaults():
    return ConversionDefaults()


@pytest.fixture
def single_page_pdf() -> bytes:
    return build_pdf([(200, 100)])


@pytest.fixture
def three_page_pdf() -> bytes:
    return build_pdf([(200, 100), (100, 200), (300, 300)], ["red", "green", "blue"])


@pytest.fixture
def three_page_pdf_path(tmp_path, three_page_pdf):
    path = tmp_path / "input" / "report.pdf"
    path.parent.mkdir()
    path.write_bytes(three_page_pdf)
    return path


@pytest.fixture
def encrypted_pdf() -> bytes:
    """Standard security handler (RC4 40-bit), user password "secret"."""
    return (FIXTURES / "encrypted.pdf").read_bytes()
