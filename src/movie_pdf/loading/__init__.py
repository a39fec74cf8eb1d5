"""
Module: movie_pdf.loading

Purpose:
    Catalogue loading and record parsing.

Key Functions:
    - load_catalogue(): Read raw JSON entries
    - parse_movie(): Validate one entry into a MovieRecord

Dependencies:
    - movie_pdf.core.models: MovieRecord
    - movie_pdf.core.schemas.validator: Schema validation

Used By:
    - movie_pdf.controller: Batch orchestration
"""

from .loader import load_catalogue, LoaderError
from .parser import parse_movie, ParseError

__all__ = [
    "load_catalogue",
    "LoaderError",
    "parse_movie",
    "ParseError",
]
