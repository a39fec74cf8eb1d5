"""
Module: movie_pdf.core.models

Purpose:
    Typed movie record built from one validated JSON entry.

Key Classes:
    - MovieRecord: Immutable movie data

Dependencies:
    - dataclasses (std)

Used By:
    - movie_pdf.loading.parser: Creates MovieRecords
    - movie_pdf.layout.composer: Reads display values
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Shown for optional fields that are missing from the input
MISSING_VALUE = "N/A"


@dataclass(frozen=True)
class MovieRecord:
    """
    One movie from the catalogue (immutable).

    Attributes:
        title: Movie title, also the source of the output filename
        year: Release year as given in the input (int or str)
        genres: Genre names
        cast: Cast member names
        link: Trailer link
        thumbnail: Poster URL
        extract: Free-text description

    Example:
        >>> movie = MovieRecord(title="Inception", year=2010, genres=("Action",))
        >>> movie.genres_text
        'Action'
    """

    title: str
    year: Optional[Union[int, str]] = None
    genres: Tuple[str, ...] = ()
    cast: Tuple[str, ...] = ()
    link: Optional[str] = None
    thumbnail: Optional[str] = None
    extract: str = ""

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("title must be a non-blank string")

    @property
    def year_text(self) -> str:
        return MISSING_VALUE if self.year is None else str(self.year)

    @property
    def genres_text(self) -> str:
        return ", ".join(self.genres) if self.genres else MISSING_VALUE

    @property
    def cast_text(self) -> str:
        return ", ".join(self.cast) if self.cast else MISSING_VALUE

    @property
    def link_text(self) -> str:
        return self.link or MISSING_VALUE
