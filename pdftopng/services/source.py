from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PdfSource = Union[str, os.PathLike, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class ResolvedSource:
    data: bytes
    # stem of the input file, None when the PDF came in as a buffer
    stem: str | None = None


def resolve_source(source: PdfSource) -> ResolvedSource:
    """
    Load the whole PDF into memory.

    Raises:
        OSError: the path does not exist or cannot be read.
        TypeError: ``source`` is neither a path nor a byte buffer.
    """
    if isinstance(source, bytes):
        return ResolvedSource(data=source)
    if isinstance(source, (bytearray, memoryview)):
        return ResolvedSource(data=bytes(source))
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        return ResolvedSource(data=path.read_bytes(), stem=path.stem)
    raise TypeError(
        f"Expected a file path or a bytes-like object, got {type(source).__name__}"
    )
