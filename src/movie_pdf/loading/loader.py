"""
Module: movie_pdf.loading.loader

Purpose:
    Read the movie catalogue (a JSON array) from disk.

Key Functions:
    - load_catalogue(): Read raw entries, fatal on unreadable input

Key Classes:
    - LoaderError: Exception for an unreadable catalogue

Dependencies:
    - json (std)
    - pathlib (std)

Used By:
    - movie_pdf.controller: Batch orchestration
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

logger = logging.getLogger(__name__)


class LoaderError(Exception):
    """Error reading the movie catalogue."""
    pass


def load_catalogue(path: Path) -> List[Any]:
    """
    Read the catalogue file and return its raw entries.

    Entries are not validated here so that one bad record can be
    skipped later without losing the others.

    Args:
        path: Path to the JSON file

    Returns:
        List of decoded JSON values, one per movie

    Raises:
        LoaderError: If the file is missing, unreadable, not valid JSON
            or not a JSON array
    """
    if not path.exists():
        raise LoaderError(f"Movie catalogue does not exist: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoaderError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, list):
        raise LoaderError(
            f"Movie catalogue must be a JSON array, got {type(data).__name__}: {path}"
        )

    logger.info(f"Read {len(data)} entries from {path}")
    return data
