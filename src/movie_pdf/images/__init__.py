"""
Module: movie_pdf.images

Purpose:
    Poster download and decoding.

Key Functions:
    - fetch_thumbnail(): Download and decode a poster
    - decode_image(): Decode poster bytes

Dependencies:
    - requests, PIL, reportlab

Used By:
    - movie_pdf.output.renderer
"""

from .provider import fetch_thumbnail, decode_image, ImageFetchError

__all__ = [
    "fetch_thumbnail",
    "decode_image",
    "ImageFetchError",
]
