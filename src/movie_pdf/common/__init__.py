"""Common utilities shared across the package."""

from __future__ import annotations

from .path_utils import (
    sanitize_title,
    output_path_for,
    PDF_EXTENSION,
)

__all__ = [
    "sanitize_title",
    "output_path_for",
    "PDF_EXTENSION",
]
