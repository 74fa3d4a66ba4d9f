from __future__ import annotations

from typing import Sequence


class PdfToPngError(Exception):
    """Base conversion exception."""


class InvalidPagesError(PdfToPngError, ValueError):
    """Requested page numbers fall outside the document (strict mode)."""


def select_page_numbers(
    total_pages: int,
    pages_to_process: Sequence[int] | None = None,
    *,
    strict: bool = False,
) -> list[int]:
    """
    Return the page numbers to render, in order.

    An explicit list is kept verbatim, duplicates included. Without one every
    page ``1..total_pages`` is selected. In strict mode any number outside the
    document raises ``InvalidPagesError``; otherwise such numbers stay in the
    list and are skipped by the caller (see ``is_page_in_range``).
    """
    if pages_to_process is None:
        return list(range(1, total_pages + 1))

    selected = list(pages_to_process)
    if strict:
        if any(n < 1 for n in selected):
            raise InvalidPagesError("Invalid pages requested, page number must be >= 1")
        if any(n > total_pages for n in selected):
            raise InvalidPagesError(
                "Invalid pages requested, page number must be <= total pages"
            )
    return selected


def is_page_in_range(page_number: int, total_pages: int) -> bool:
    return 1 <= page_number <= total_pages
