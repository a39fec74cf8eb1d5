"""Path and filename utilities.

Derives output PDF paths from movie titles.
"""

from __future__ import annotations

import re
from pathlib import Path

PDF_EXTENSION = ".pdf"
FILLER = "_"


def sanitize_title(title: str) -> str:
    """Replace every character outside [A-Za-z0-9] with an underscore.

    The mapping is one character to one character, so the result is a
    pure function of the title and keeps its length.

    Args:
        title: Movie title.

    Returns:
        Filesystem-safe stem.

    Examples:
        >>> sanitize_title("Inception")
        'Inception'
        >>> sanitize_title("Spider-Man: No Way Home")
        'Spider_Man__No_Way_Home'
        >>> sanitize_title("Amélie")
        'Am_lie'
    """
    return re.sub(r"[^A-Za-z0-9]", FILLER, title)


def output_path_for(title: str, output_dir: Path) -> Path:
    """Build the PDF path for a movie title inside output_dir.

    Examples:
        >>> output_path_for("Inception", Path("output"))
        PosixPath('output/Inception.pdf')
    """
    return output_dir / f"{sanitize_title(title)}{PDF_EXTENSION}"
