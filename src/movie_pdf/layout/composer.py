"""
Module: movie_pdf.layout.composer

Purpose:
    Turn a MovieRecord into the ordered list of content blocks that make
    up its PDF: title, optional poster, field lines, description.

Key Functions:
    - compose_movie(): Build blocks for one movie

Dependencies:
    - movie_pdf.core.models: MovieRecord
    - movie_pdf.layout.models: ContentBlock

Used By:
    - movie_pdf.output.renderer: Document assembly
"""

from __future__ import annotations

from typing import List

from movie_pdf.core.models import MovieRecord

from .models import ContentBlock

# Field label and the MovieRecord property that supplies its value
FIELD_ORDER = (
    ("Year", "year_text"),
    ("Genres", "genres_text"),
    ("Cast", "cast_text"),
    ("YouTube Link", "link_text"),
)


def compose_movie(movie: MovieRecord, *, include_image: bool = True) -> List[ContentBlock]:
    """
    Build the content blocks for one movie, in drawing order.

    Args:
        movie: Validated movie record
        include_image: Emit an IMAGE block when the movie has a thumbnail

    Returns:
        Blocks in order: heading, [image], fields, "Description:", paragraph

    Example:
        >>> blocks = compose_movie(MovieRecord(title="Inception"))
        >>> blocks[0].text
        'Title: Inception'
    """
    blocks = [ContentBlock.heading(f"Title: {movie.title}")]

    if include_image and movie.thumbnail:
        blocks.append(ContentBlock.image(movie.thumbnail))

    for label, attr in FIELD_ORDER:
        blocks.append(ContentBlock.field(label, getattr(movie, attr)))

    blocks.append(ContentBlock.field("Description", ""))

    if movie.extract:
        blocks.append(ContentBlock.paragraph(movie.extract))

    return blocks
