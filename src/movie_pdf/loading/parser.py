"""
Module: movie_pdf.loading.parser

Purpose:
    Validate a single decoded JSON entry and convert it into a typed
    MovieRecord.

Key Functions:
    - parse_movie(): Validate and convert one record

Key Classes:
    - ParseError: Exception for records that cannot be converted

Dependencies:
    - movie_pdf.core.schemas.validator: Schema validation
    - movie_pdf.core.models: MovieRecord

Used By:
    - movie_pdf.controller: Per-record processing
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from movie_pdf.core.models import MovieRecord
from movie_pdf.core.schemas.validator import ValidationError, validate_movie


class ParseError(Exception):
    """Error converting a catalogue entry into a MovieRecord."""
    pass


def parse_movie(data: Any, *, source: str = "catalogue") -> MovieRecord:
    """
    Validate a JSON entry and build a MovieRecord from it.

    Loosely typed values are normalised: list fields may also be given
    as a single comma-separated string, an integral float year becomes
    an int, and a null description becomes empty text.

    Args:
        data: Decoded JSON value for one movie
        source: Source identifier for error messages

    Returns:
        MovieRecord

    Raises:
        ParseError: If the entry fails schema validation

    Example:
        >>> parse_movie({"title": "Inception", "year": 2010}).year
        2010
    """
    try:
        validate_movie(data)
    except ValidationError as e:
        raise ParseError(f"Invalid movie in {source}: {e}") from e

    return MovieRecord(
        title=data["title"].strip(),
        year=_parse_year(data.get("year")),
        genres=_parse_names(data.get("genres")),
        cast=_parse_names(data.get("cast")),
        link=_optional_text(data.get("link")),
        thumbnail=_optional_text(data.get("thumbnail")),
        extract=data.get("extract") or "",
    )


def _parse_year(value: Any) -> Optional[Union[int, str]]:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.isdecimal() else (value or None)
    return value


def _parse_names(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(item).strip() for item in value if str(item).strip())


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None
