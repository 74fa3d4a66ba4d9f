from __future__ import annotations

from pathlib import Path


def page_file_name(base_name: str, page_number: int) -> str:
    return f"{base_name}_page_{page_number}.png"


def resolve_base_name(
    output_file_mask: str | None, source_stem: str | None, default_mask: str
) -> str:
    """Explicit mask, else the input file's stem, else the library default."""
    if output_file_mask:
        return output_file_mask
    if source_stem:
        return source_stem
    return default_mask


class OutputFolder:
    """Local folder that rendered pages are written to."""

    def __init__(self, root_dir: str):
        self.root = Path(root_dir).resolve()

    def ensure(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def abs_path(self, name: str) -> Path:
        return self.root / name

    def save_bytes(self, name: str, data: bytes) -> str:
        """Write ``data`` under ``name``, overwriting; returns the absolute path."""
        path = self.abs_path(name)
        path.write_bytes(data)
        return str(path)
