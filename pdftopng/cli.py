import argparse
import asyncio
import logging
import sys

import pypdfium2 as pdfium
from pydantic import ValidationError

from pdftopng.core.config import settings
from pdftopng.schemas import PdfToPngOptions
from pdftopng.services.converter import pdf_to_png
from pdftopng.services.pages import InvalidPagesError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdftopng", description="Render PDF pages to PNG images"
    )
    parser.add_argument("input", help="Path to the PDF file")
    parser.add_argument("-o", "--out", dest="output_folder", help="Output folder")
    parser.add_argument("--mask", dest="output_file_mask", help="Base name of the PNG files")
    parser.add_argument("--width", dest="target_width", type=float)
    parser.add_argument("--height", dest="target_height", type=float)
    parser.add_argument("--scale", dest="viewport_scale", type=float)
    parser.add_argument("--pages", dest="pages_to_process", type=int, nargs="+")
    parser.add_argument("--strict", dest="strict_pages_to_process", action="store_true", default=None)
    parser.add_argument("--password", dest="pdf_file_password")
    parser.add_argument("--no-xfa", dest="enable_xfa", action="store_false", default=None)
    parser.add_argument("--verbosity", dest="verbosity_level", type=int)
    return parser


async def run(args: argparse.Namespace) -> int:
    fields = {k: v for k, v in vars(args).items() if k != "input" and v is not None}
    try:
        options = PdfToPngOptions(**fields)
        pages = await pdf_to_png(args.input, options)
    except (OSError, ValidationError, InvalidPagesError, pdfium.PdfiumError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for page in pages:
        target = page.path or "(not written)"
        print(f"page {page.page_number}: {page.name} {page.width:.0f}x{page.height:.0f} -> {target}")
    return 0


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=settings.log_level)
    args = build_parser().parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
