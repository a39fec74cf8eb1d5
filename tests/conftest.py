import io
import sys
from pathlib import Path

import pytest
from PIL import Image

# Add src to sys.path so we can import movie_pdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def png_bytes():
    """Return a small encoded PNG poster."""
    img = Image.new("RGB", (40, 60), color="navy")
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def inception_entry():
    """Return a raw catalogue entry as it appears in movies.json."""
    return {
        "title": "Inception",
        "year": 2010,
        "genres": ["Action", "Science Fiction"],
        "cast": ["Leonardo DiCaprio", "Elliot Page"],
        "link": "https://www.youtube.com/watch?v=YoHD9XEInc0",
        "thumbnail": "https://example.org/posters/inception.jpg",
        "extract": " ".join(["dream"] * 300),
    }


@pytest.fixture
def write_catalogue(tmp_path: Path):
    """Factory writing a list of entries to a JSON catalogue file."""
    import json

    def _write(entries, name: str = "movies.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path
    return _write
