from __future__ import annotations

from pdftopng.schemas.options import ResolvedOptions
from pdftopng.services.pdf_engine import Viewport


def resolve_scale(natural: Viewport, options: ResolvedOptions) -> float:
    """
    Scale for a page whose unscaled viewport is ``natural``.

    Both targets fit the page inside the box keeping its aspect ratio; a
    single target fits that dimension. An explicit viewport scale wins over
    everything.
    """
    if options.viewport_scale:
        return options.viewport_scale

    scale = options.default_viewport_scale
    if options.target_width and options.target_height:
        scale = min(
            options.target_width / natural.width,
            options.target_height / natural.height,
        )
    elif options.target_width:
        scale = options.target_width / natural.width
    elif options.target_height:
        scale = options.target_height / natural.height
    return scale
