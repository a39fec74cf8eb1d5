"""
Module: movie_pdf.config

Purpose:
    Configuration dataclass for a generation run. Immutable
    configuration with validation on construction.

Key Classes:
    - GeneratorConfig: Input/output locations and fetch behaviour

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - movie_pdf.controller: Batch orchestration
    - movie_pdf.__main__: Process entry point
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from movie_pdf.layout.config import LayoutConfig


DEFAULT_INPUT_PATH = Path("data/movies.json")
DEFAULT_OUTPUT_DIR = Path("output")
DEFAULT_FETCH_TIMEOUT = 10.0


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for a generation run (immutable).

    Attributes:
        input_path: JSON file holding the array of movie records
        output_dir: Directory receiving one PDF per movie
        fetch_timeout: Seconds to wait for a poster download
        fetch_images: Whether to download posters at all
        layout: Page geometry and fonts

    Example:
        >>> config = GeneratorConfig(output_dir=Path("/tmp/movies"))
        >>> config.input_path
        PosixPath('data/movies.json')
    """

    input_path: Path = DEFAULT_INPUT_PATH
    output_dir: Path = DEFAULT_OUTPUT_DIR

    # Posters
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    fetch_images: bool = True

    layout: LayoutConfig = field(default_factory=LayoutConfig)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive: {self.fetch_timeout}")
