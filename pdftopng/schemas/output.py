from __future__ import annotations

import base64
from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class PngPageOutput:
    page_number: int
    name: str
    content: bytes
    # "" when no output folder was configured
    path: str
    width: float
    height: float


class PngPageResponse(BaseModel):
    """One rendered page as returned by the HTTP API."""
    page_number: int
    name: str
    width: float
    height: float
    size: int = Field(..., description="PNG size in bytes")
    content_base64: str

    @classmethod
    def from_output(cls, page: PngPageOutput) -> PngPageResponse:
        return cls(
            page_number=page.page_number,
            name=page.name,
            width=page.width,
            height=page.height,
            size=len(page.content),
            content_base64=base64.b64encode(page.content).decode("ascii"),
        )


class ConvertResponse(BaseModel):
    filename: str
    page_count: int
    pages: list[PngPageResponse]
