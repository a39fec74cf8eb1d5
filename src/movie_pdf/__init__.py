"""Top-level package for the Movie PDF generator.

Provides subpackages:
- movie_pdf.loading – reading and validating the movie catalogue
- movie_pdf.layout – text wrapping, pagination cursor and block composition
- movie_pdf.images – poster download and decoding
- movie_pdf.output – PDF rendering
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("movie_pdf")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The movie_pdf authors"
__all__: list[str] = ["__version__"]
