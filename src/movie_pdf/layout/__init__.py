"""
Module: movie_pdf.layout

Purpose:
    Document layout engine: text measurement and wrapping, vertical
    cursor with automatic page breaks, and per-movie block composition.

Key Functions:
    - measure_text(), wrap_text(): Font-metric text wrapping
    - compose_movie(): MovieRecord -> ContentBlocks
    - page_surface(): Scoped cursor over a canvas

Key Classes:
    - LayoutConfig: Fixed page geometry and fonts
    - LayoutCursor: Pagination state
    - ContentBlock: Renderable unit

Dependencies:
    - reportlab: Font metrics and canvas

Used By:
    - movie_pdf.output.renderer
"""

from .config import LayoutConfig
from .models import BlockKind, ContentBlock
from .wrapper import measure_text, wrap_text
from .cursor import LayoutCursor, page_surface
from .composer import compose_movie

__all__ = [
    # Config
    "LayoutConfig",
    # Models
    "BlockKind",
    "ContentBlock",
    # Functions
    "measure_text",
    "wrap_text",
    "compose_movie",
    "page_surface",
    # Cursor
    "LayoutCursor",
]
