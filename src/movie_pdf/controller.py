"""
Module: movie_pdf.controller

Purpose:
    Orchestrate a generation run.
    Load → Parse → Compose → Lay out → Render, one movie at a time.

Key Functions:
    - generate_all(): Render every movie in the catalogue
    - generate_movie_pdf(): Render a single movie

Key Classes:
    - BatchResult: Summary of a run
    - MovieFailure: One skipped record

Dependencies:
    - movie_pdf.loading: Catalogue reading and parsing
    - movie_pdf.output: PDF rendering
    - movie_pdf.common.path_utils: Output naming

Used By:
    - movie_pdf.__main__: Process entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List

from movie_pdf.common.path_utils import output_path_for
from movie_pdf.core.models import MovieRecord

from .config import GeneratorConfig
from .loading import load_catalogue, parse_movie, ParseError
from .output import render_movie_pdf, RenderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovieFailure:
    """
    A catalogue entry that produced no PDF.

    Attributes:
        index: Position of the entry in the catalogue
        title: Title if one could be read, else None
        reason: Error message
    """
    index: int
    title: str | None
    reason: str


@dataclass(frozen=True)
class BatchResult:
    """
    Summary of a generation run (immutable).

    Attributes:
        written: Paths of the PDFs produced, in catalogue order
        failures: Entries that were skipped
        page_count: Total pages across all written PDFs
        elapsed: Wall-clock seconds for the run

    Example:
        >>> result = generate_all(GeneratorConfig())
        >>> print(f"{len(result.written)} PDFs, {len(result.failures)} skipped")
    """
    written: tuple[Path, ...]
    failures: tuple[MovieFailure, ...] = ()
    page_count: int = 0
    elapsed: float = 0.0

    @property
    def total(self) -> int:
        """Number of catalogue entries processed."""
        return len(self.written) + len(self.failures)


def generate_movie_pdf(movie: MovieRecord, config: GeneratorConfig) -> tuple[Path, int]:
    """
    Render one movie into config.output_dir.

    Args:
        movie: Movie to render
        config: Run configuration

    Returns:
        (output path, page count)

    Raises:
        RenderError: If the PDF cannot be built or written
    """
    output_path = output_path_for(movie.title, config.output_dir)
    page_count = render_movie_pdf(
        movie,
        output_path,
        layout=config.layout,
        fetch_images=config.fetch_images,
        fetch_timeout=config.fetch_timeout,
    )
    return output_path, page_count


def generate_all(config: GeneratorConfig) -> BatchResult:
    """
    Render every movie in the catalogue.

    Pipeline:
    1. Read the catalogue (fatal on failure)
    2. For each entry: parse, render, write
    3. Entries that fail for any reason are logged and skipped; the
       batch continues

    Args:
        config: Run configuration

    Returns:
        BatchResult with written paths and skipped entries

    Raises:
        LoaderError: If the catalogue cannot be read
    """
    start_time = time.perf_counter()
    logger.info(f"Starting generation from {config.input_path} into {config.output_dir}")

    entries = load_catalogue(config.input_path)

    written: List[Path] = []
    failures: List[MovieFailure] = []
    page_count = 0

    for index, entry in enumerate(entries):
        title = _peek_title(entry)
        label = repr(title) if title else f"entry {index}"
        try:
            movie = parse_movie(entry, source=f"{config.input_path.name}[{index}]")
            output_path, pages = generate_movie_pdf(movie, config)
        except (ParseError, RenderError) as e:
            logger.error(f"Error generating PDF for movie {label}: {e}")
            failures.append(MovieFailure(index=index, title=title, reason=str(e)))
            continue
        except Exception as e:
            logger.exception(f"Unexpected error generating PDF for movie {label}: {e}")
            failures.append(MovieFailure(index=index, title=title, reason=str(e)))
            continue

        logger.info(f"PDF generated for movie: {movie.title}")
        written.append(output_path)
        page_count += pages

    elapsed = time.perf_counter() - start_time
    logger.info(
        f"Generated {len(written)}/{len(entries)} PDFs "
        f"({page_count} pages) in {elapsed:.2f}s"
    )

    return BatchResult(
        written=tuple(written),
        failures=tuple(failures),
        page_count=page_count,
        elapsed=elapsed,
    )


def _peek_title(entry: Any) -> str | None:
    """Best-effort title for diagnostics, before validation."""
    if isinstance(entry, dict) and isinstance(entry.get("title"), str):
        return entry["title"].strip() or None
    return None
