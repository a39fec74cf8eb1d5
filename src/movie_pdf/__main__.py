#!/usr/bin/env python3
"""Generate one PDF per movie from data/movies.json into output/."""

from __future__ import annotations

import logging
import sys

from movie_pdf.config import GeneratorConfig
from movie_pdf.controller import generate_all
from movie_pdf.loading import LoaderError

logger = logging.getLogger("movie_pdf")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

    config = GeneratorConfig()
    try:
        result = generate_all(config)
    except LoaderError:
        logger.exception("Error reading the movie catalogue; no PDFs were generated")
        return 1

    if result.failures:
        logger.warning(f"{len(result.failures)} movie(s) skipped, see errors above")
    print(f"Movie PDFs generated successfully: {len(result.written)} written to {config.output_dir}/")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
