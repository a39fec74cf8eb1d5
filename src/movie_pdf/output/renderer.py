"""
Module: movie_pdf.output.renderer

Purpose:
    Render one movie to a PDF file using ReportLab.
    Blocks from the composer are drawn in order through a LayoutCursor,
    which starts new pages as the description runs long.

Key Functions:
    - render_movie_pdf(): Main rendering function

Key Classes:
    - RenderError: Exception for build or write failures

Dependencies:
    - reportlab: PDF generation
    - movie_pdf.layout: Cursor, composer, config
    - movie_pdf.images: Poster download

Used By:
    - movie_pdf.controller: Batch orchestration
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from movie_pdf.core.models import MovieRecord
from movie_pdf.images.provider import DEFAULT_TIMEOUT, ImageFetchError, fetch_thumbnail
from movie_pdf.layout.composer import compose_movie
from movie_pdf.layout.config import LayoutConfig
from movie_pdf.layout.cursor import LayoutCursor, page_surface
from movie_pdf.layout.models import BlockKind, ContentBlock

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Error building or writing a movie PDF."""
    pass


def _get_creator() -> str:
    """Get creator string with current version number."""
    from movie_pdf import __version__
    return f"movie_pdf v{__version__}"


def render_movie_pdf(
    movie: MovieRecord,
    output_path: Path,
    *,
    layout: Optional[LayoutConfig] = None,
    fetch_images: bool = True,
    fetch_timeout: float = DEFAULT_TIMEOUT,
) -> int:
    """
    Render a movie to a PDF file.

    Draws the centered title, the poster (when available), the field
    lines and the wrapped description. The file is written once, after
    every page is laid out.

    Args:
        movie: Movie to render
        output_path: Path to write PDF (parent directories are created)
        layout: Page geometry and fonts (default LayoutConfig())
        fetch_images: Download the poster when the movie has one
        fetch_timeout: Seconds to wait for the poster

    Returns:
        Number of pages written

    Raises:
        RenderError: If the PDF cannot be built or written

    Example:
        >>> render_movie_pdf(movie, Path("output/Inception.pdf"))
        2
    """
    layout = layout or LayoutConfig()
    blocks = compose_movie(movie, include_image=fetch_images)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)

        c = canvas.Canvas(
            str(output_path),
            pagesize=(layout.page_width, layout.page_height),
        )
        c.setTitle(movie.title)
        c.setCreator(_get_creator())

        with page_surface(c, layout) as cursor:
            for block in blocks:
                _draw_block(cursor, block, movie, fetch_timeout)
            page_count = cursor.page_count

        c.save()
    except (OSError, ValueError, TypeError, KeyError) as e:
        raise RenderError(f"Failed to render {movie.title!r} to {output_path}: {e}") from e

    logger.info(f"Rendered {page_count} pages to {output_path}")
    return page_count


def _draw_block(
    cursor: LayoutCursor,
    block: ContentBlock,
    movie: MovieRecord,
    fetch_timeout: float,
) -> None:
    """Draw a single content block at the cursor."""
    config = cursor.config

    if block.kind is BlockKind.HEADING:
        cursor.write_centered_line(
            block.display_text,
            config.heading_font,
            config.heading_size,
            advance=config.title_gap,
        )
    elif block.kind is BlockKind.IMAGE:
        _draw_image(cursor, block.image_url, movie, fetch_timeout)
    else:
        cursor.write_wrapped(block.display_text, config.body_font, config.body_size)


def _draw_image(
    cursor: LayoutCursor,
    url: str,
    movie: MovieRecord,
    fetch_timeout: float,
) -> None:
    """
    Draw the poster centered below the current position.

    A poster that cannot be fetched or decoded is skipped and the
    cursor is left where it was.
    """
    config = cursor.config

    try:
        reader = fetch_thumbnail(url, timeout=fetch_timeout)
    except ImageFetchError as e:
        logger.warning(f"Could not load image for movie {movie.title!r}: {e}")
        return

    top = cursor.reserve(config.image_height)
    x = (config.page_width - config.image_width) / 2
    cursor.canvas.drawImage(
        reader,
        x,
        top - config.image_height,
        width=config.image_width,
        height=config.image_height,
    )
    cursor.advance(config.image_height + config.image_gap)
